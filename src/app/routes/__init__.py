"""
FastAPI Routes.

페이지 라우트 (HTML) + 폼/업로드 라우트
"""

from . import forms, pages, upload

__all__ = ["forms", "pages", "upload"]
