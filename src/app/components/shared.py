"""
공통 페이지 chrome: Banner / Footer / PageHeading + 페이지 조립.

페이지는 PageChrome을 이름 있는 필드로 보유 (mixin 아님).
섹션 순서는 sections()에서 명시적으로 결정.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from markupsafe import Markup

from src.domain.schemas import HeadingPlacement
from src.render.html import HtmlBuilder, Renderable, render_components, render_to_string

PAGE_BODY_STYLE = "background-color:tan"
HEADING_STYLE = "color:maroon;background-color:#dfc673"
BANNER_STYLE = "background-color:#2c3e50; color:white; padding:20px"
FOOTER_STYLE = "background-color:lightgray"
COPYRIGHT = Markup("Copyright &copy; 2025")


@dataclass(frozen=True)
class Banner:
    """페이지 상단 header."""

    title: str

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("header", style=BANNER_STYLE):
            builder.element("h1", self.title)


@dataclass(frozen=True)
class Footer:
    """저작권 footer."""

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("div", style=FOOTER_STYLE):
            builder.element("p", COPYRIGHT, style="color:gray")


@dataclass(frozen=True)
class PageHeading:
    text: str

    def render(self, builder: HtmlBuilder) -> None:
        builder.element("h1", self.text, style=HEADING_STYLE)


@dataclass(frozen=True)
class PageChrome:
    """title → Banner, Footer."""

    title: str

    def banner(self) -> Banner:
        return Banner(title=self.title)

    def footer(self) -> Footer:
        return Footer()


# =============================================================================
# Page Assembly
# =============================================================================


def page_sections(
    chrome: PageChrome,
    body: Renderable,
    heading: str,
    placement: HeadingPlacement = HeadingPlacement.AFTER_FOOTER,
) -> list[Renderable]:
    """
    페이지 섹션 순서 결정.

    AFTER_FOOTER: banner → body → footer → heading (기존 출력 순서)
    BEFORE_BODY:  banner → heading → body → footer
    """
    title = PageHeading(heading)
    if placement is HeadingPlacement.BEFORE_BODY:
        return [chrome.banner(), title, body, chrome.footer()]
    return [chrome.banner(), body, chrome.footer(), title]


@dataclass(frozen=True)
class ComposedPage(ABC):
    """
    chrome + heading + body 컴포넌트로 구성된 페이지.

    하위 클래스는 body()만 구현한다.
    """

    chrome: PageChrome
    heading: str
    heading_placement: HeadingPlacement = HeadingPlacement.AFTER_FOOTER

    @abstractmethod
    def body(self) -> Renderable: ...

    def sections(self) -> list[Renderable]:
        return page_sections(self.chrome, self.body(), self.heading, self.heading_placement)

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("body", style=PAGE_BODY_STYLE):
            render_components(builder, self.sections())

    def to_html(self) -> str:
        """완성된 HTML 문자열. 같은 페이지는 항상 같은 결과."""
        return render_to_string(self)
