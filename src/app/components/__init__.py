"""
Page components: 공통 chrome + 페이지별 컴포넌트.
"""

from .contact import ContactForm, ContactPage, ContactReceipt
from .home import ADOPTABLE_CATS, Cat, CatAdoptionHero, HomePage
from .shared import Banner, ComposedPage, Footer, PageChrome, PageHeading
from .site import SitePages, build_pages

__all__ = [
    # shared
    "Banner",
    "Footer",
    "PageHeading",
    "PageChrome",
    "ComposedPage",
    # home
    "Cat",
    "ADOPTABLE_CATS",
    "CatAdoptionHero",
    "HomePage",
    # contact
    "ContactForm",
    "ContactPage",
    "ContactReceipt",
    # site
    "SitePages",
    "build_pages",
]
