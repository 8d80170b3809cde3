"""
Home 페이지: 고양이 입양 hero 섹션.
"""

from dataclasses import dataclass

from src.app.components.shared import ComposedPage
from src.render.html import HtmlBuilder, Renderable

CONTAINER_STYLE = "max-width:1200px; margin:0 auto; padding:40px 20px"
GRID_STYLE = (
    "display:grid; grid-template-columns:repeat(auto-fit, minmax(300px, 1fr)); "
    "gap:30px; margin-top:40px"
)
CARD_STYLE = (
    "background:white; border-radius:10px; "
    "box-shadow:0 4px 6px rgba(0,0,0,0.1); padding:20px"
)
CARD_IMG_STYLE = "width:100%; border-radius:8px; margin-bottom:15px"
CARD_BUTTON_STYLE = (
    "background-color:#e67e22; color:white; border:none; padding:10px 20px; "
    "border-radius:5px; cursor:pointer; font-size:1em; margin-top:10px"
)


@dataclass(frozen=True)
class Cat:
    """입양 카드 한 장."""

    name: str
    image_url: str
    alt: str
    description: str


ADOPTABLE_CATS: tuple[Cat, ...] = (
    Cat(
        name="Whiskers",
        image_url="https://placekitten.com/400/300",
        alt="Orange tabby cat",
        description=(
            "A friendly orange tabby who loves to play and cuddle. "
            "Great with kids and other pets. Age: 2 years."
        ),
    ),
    Cat(
        name="Luna",
        image_url="https://placekitten.com/401/300",
        alt="Gray and white cat",
        description=(
            "A calm and gentle gray beauty who enjoys quiet afternoons. "
            "Perfect for apartment living. Age: 4 years."
        ),
    ),
    Cat(
        name="Shadow",
        image_url="https://placekitten.com/402/300",
        alt="Black cat",
        description=(
            "A playful black kitten full of energy and curiosity. "
            "Loves interactive toys and exploring. Age: 8 months."
        ),
    ),
)


@dataclass(frozen=True)
class CatAdoptionHero:
    """제목, 소개 문구, 카드 그리드."""

    cats: tuple[Cat, ...] = ADOPTABLE_CATS

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("div", style=CONTAINER_STYLE):
            builder.element(
                "h2",
                "Find Your Purr-fect Companion",
                style="text-align:center; color:#2c3e50; font-size:2.5em; margin-bottom:20px",
            )
            builder.element(
                "p",
                "Give a loving cat a forever home. "
                "Browse our adoptable cats and kittens waiting to meet you!",
                style="text-align:center; color:#555; font-size:1.2em; margin-bottom:40px",
            )
            with builder.tag("div", style=GRID_STYLE):
                for cat in self.cats:
                    self._render_card(builder, cat)

    @staticmethod
    def _render_card(builder: HtmlBuilder, cat: Cat) -> None:
        with builder.tag("div", style=CARD_STYLE):
            builder.void("img", src=cat.image_url, alt=cat.alt, style=CARD_IMG_STYLE)
            builder.element("h3", cat.name, style="color:#2c3e50; margin:10px 0")
            builder.element("p", cat.description, style="color:#666; line-height:1.6")
            builder.element("button", f"Meet {cat.name}", style=CARD_BUTTON_STYLE)


@dataclass(frozen=True)
class HomePage(ComposedPage):
    """Home = chrome + CatAdoptionHero."""

    def body(self) -> Renderable:
        return CatAdoptionHero()
