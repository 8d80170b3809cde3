"""
Page Routes: HTML 페이지.

- GET /         → Home
- GET /contact  → Contact 폼
- POST /contact → 제출 값 확인 화면
"""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from src.app.components import ContactReceipt, SitePages
from src.render.html import render_to_string

logger = logging.getLogger(__name__)

router = APIRouter()


def _pages(request: Request) -> SitePages:
    pages: SitePages = request.app.state.pages
    return pages


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request) -> HTMLResponse:
    """홈 페이지."""
    return HTMLResponse(content=_pages(request).home.to_html())


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request) -> HTMLResponse:
    """문의 폼 페이지."""
    return HTMLResponse(content=_pages(request).contact.to_html())


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact(
    name: str = Form(""),
    email: str = Form(""),
    message: str = Form(""),
) -> HTMLResponse:
    """
    문의 폼 제출.

    받은 값을 escape해서 그대로 보여준다. 저장/전송 없음.
    """
    receipt = ContactReceipt(name=name, email=email, message=message)
    logger.info(receipt.summary())
    return HTMLResponse(content=render_to_string(receipt))
