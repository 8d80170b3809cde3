"""
Render layer: HTML 마크업 생성.

역할:
- HtmlBuilder: escape된 마크업 조각을 순서대로 누적
- Renderable: builder에 자기 조각을 append하는 컴포넌트 계약
"""

from .html import HtmlBuilder, Renderable, render_components, render_to_string

__all__ = [
    "HtmlBuilder",
    "Renderable",
    "render_components",
    "render_to_string",
]
