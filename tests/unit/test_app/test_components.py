"""
test_components.py - 페이지 컴포넌트 렌더링 테스트

- 공통 chrome (Banner, Footer)
- Home / Contact 조립 순서
- 렌더링 idempotent
"""

import pytest

from src.app.components import (
    ADOPTABLE_CATS,
    Banner,
    CatAdoptionHero,
    ComposedPage,
    ContactForm,
    ContactPage,
    ContactReceipt,
    Footer,
    HomePage,
    PageChrome,
    PageHeading,
    build_pages,
)
from src.domain.schemas import HeadingPlacement, PageSettings, SiteSettings
from src.render.html import Renderable, render_to_string

BANNER_HTML = (
    '<header style="background-color:#2c3e50; color:white; padding:20px">'
    "<h1>My Website</h1></header>"
)
HEADING_HTML = '<h1 style="color:maroon;background-color:#dfc673">Home Page</h1>'


def _home(placement: HeadingPlacement = HeadingPlacement.AFTER_FOOTER) -> HomePage:
    return HomePage(
        chrome=PageChrome(title="My Website"),
        heading="Home Page",
        heading_placement=placement,
    )


# =============================================================================
# Chrome
# =============================================================================

class TestPageChrome:
    """PageChrome → Banner, Footer."""

    def test_banner_carries_title(self):
        assert PageChrome(title="X").banner() == Banner(title="X")

    def test_footer(self):
        assert PageChrome(title="X").footer() == Footer()

    def test_banner_html(self):
        assert render_to_string(Banner(title="My Website")) == BANNER_HTML

    def test_footer_html(self):
        assert render_to_string(Footer()) == (
            '<div style="background-color:lightgray">'
            '<p style="color:gray">Copyright &copy; 2025</p></div>'
        )

    def test_banner_title_escaped(self):
        html = render_to_string(Banner(title="<b>Cats & Dogs</b>"))

        assert "&lt;b&gt;Cats &amp; Dogs&lt;/b&gt;" in html

    def test_composed_page_requires_body(self):
        """body() 없는 페이지는 생성 불가."""
        with pytest.raises(TypeError):
            ComposedPage(chrome=PageChrome(title="X"), heading="Y")

    def test_components_are_renderable(self):
        for component in (Banner("t"), Footer(), PageHeading("h"), ContactForm(), CatAdoptionHero()):
            assert isinstance(component, Renderable)


# =============================================================================
# Home
# =============================================================================

class TestHomePage:
    """Home 페이지 렌더링."""

    def test_contains_banner_and_heading(self):
        html = _home().to_html()

        assert BANNER_HTML in html
        assert HEADING_HTML in html

    def test_wrapped_in_body(self):
        html = _home().to_html()

        assert html.startswith('<body style="background-color:tan">')
        assert html.endswith("</body>")

    def test_heading_after_footer_by_default(self):
        """기본 순서: banner → hero → footer → heading."""
        html = _home().to_html()

        banner = html.index("<header")
        hero = html.index("Find Your Purr-fect Companion")
        footer = html.index("Copyright")
        heading = html.index(HEADING_HTML)
        assert banner < hero < footer < heading

    def test_heading_before_body(self):
        html = _home(HeadingPlacement.BEFORE_BODY).to_html()

        banner = html.index("<header")
        heading = html.index(HEADING_HTML)
        hero = html.index("Find Your Purr-fect Companion")
        footer = html.index("Copyright")
        assert banner < heading < hero < footer

    def test_sections_explicit(self):
        sections = _home().sections()

        assert sections[0] == Banner(title="My Website")
        assert isinstance(sections[1], CatAdoptionHero)
        assert sections[2] == Footer()
        assert sections[3] == PageHeading("Home Page")

    def test_render_is_idempotent(self):
        page = _home()

        assert page.to_html() == page.to_html()


class TestCatAdoptionHero:
    """Hero 카드 그리드."""

    def test_one_card_per_cat(self):
        html = render_to_string(CatAdoptionHero())

        assert len(ADOPTABLE_CATS) == 3
        for cat in ADOPTABLE_CATS:
            assert f'<h3 style="color:#2c3e50; margin:10px 0">{cat.name}</h3>' in html
            assert f"Meet {cat.name}</button>" in html
            assert f'src="{cat.image_url}"' in html

    def test_grid_layout(self):
        html = render_to_string(CatAdoptionHero())

        assert "display:grid" in html
        assert html.count("<img ") == 3


# =============================================================================
# Contact
# =============================================================================

class TestContactPage:
    """Contact 페이지 렌더링."""

    def test_form_fields(self):
        page = ContactPage(chrome=PageChrome(title="Contact Us"), heading="Get in Touch")
        html = page.to_html()

        assert '<form action="/contact" method="POST">' in html
        assert '<input type="text" name="name" placeholder="Name">' in html
        assert '<input type="email" name="email" placeholder="Email">' in html
        assert '<textarea name="message" placeholder="Message"></textarea>' in html
        assert '<button type="submit">Send</button>' in html

    def test_chrome_and_heading(self):
        page = ContactPage(chrome=PageChrome(title="Contact Us"), heading="Get in Touch")
        html = page.to_html()

        assert "<h1>Contact Us</h1>" in html
        assert ">Get in Touch</h1>" in html
        assert html.index("</form>") < html.index("Copyright") < html.index("Get in Touch")


class TestContactReceipt:
    """POST /contact 결과 화면."""

    def test_summary(self):
        receipt = ContactReceipt(name="Jane", email="j@x.com", message="Hi")

        assert receipt.summary() == "Posted - name: Jane, email: j@x.com, message: Hi"

    def test_html(self):
        html = render_to_string(ContactReceipt(name="Jane", email="j@x.com", message="Hi"))

        assert html == (
            '<body style="background-color:darkgreen">'
            '<h1 style="color:maroon;background-color:#dfc673">Welcome</h1>'
            "<hr>"
            "<p>Posted - name: Jane, email: j@x.com, message: Hi</p>"
            "</body>"
        )

    def test_values_escaped(self):
        html = render_to_string(ContactReceipt(name="<i>x</i>", email="", message=""))

        assert "<i>" not in html
        assert "&lt;i&gt;x&lt;/i&gt;" in html


# =============================================================================
# build_pages
# =============================================================================

class TestBuildPages:
    """설정 → 페이지 인스턴스."""

    def test_defaults(self):
        pages = build_pages(SiteSettings())

        assert pages.home.chrome.title == "My Website"
        assert pages.home.heading == "Home Page"
        assert pages.contact.chrome.title == "Contact Us"
        assert pages.contact.heading == "Get in Touch"

    def test_custom_settings(self):
        settings = SiteSettings(
            home=PageSettings(
                title="Cats",
                heading="Adopt",
                heading_placement=HeadingPlacement.BEFORE_BODY,
            )
        )
        pages = build_pages(settings)

        assert pages.home.chrome == PageChrome(title="Cats")
        assert pages.home.heading_placement is HeadingPlacement.BEFORE_BODY
