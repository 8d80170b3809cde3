"""
SitePages: startup 시 설정으로부터 1회 생성되는 불변 페이지 묶음.

app.state.pages 로 serving layer에 전달된다.
"""

from dataclasses import dataclass

from src.app.components.contact import ContactPage
from src.app.components.home import HomePage
from src.app.components.shared import PageChrome
from src.domain.schemas import SiteSettings


@dataclass(frozen=True)
class SitePages:
    home: HomePage
    contact: ContactPage


def build_pages(settings: SiteSettings) -> SitePages:
    """설정 → 페이지 인스턴스."""
    return SitePages(
        home=HomePage(
            chrome=PageChrome(title=settings.home.title),
            heading=settings.home.heading,
            heading_placement=settings.home.heading_placement,
        ),
        contact=ContactPage(
            chrome=PageChrome(title=settings.contact.title),
            heading=settings.contact.heading,
            heading_placement=settings.contact.heading_placement,
        ),
    )
