"""
HTML 빌더: markupsafe 기반 마크업 조각 누적기.

역할:
- 태그/속성/텍스트를 버퍼에 순서대로 append
- 모든 텍스트와 속성 값은 escape (Markup은 그대로 통과)
- Renderable 컴포넌트는 builder를 받아 자기 조각만 append

Usage:
    b = HtmlBuilder()
    with b.tag("header", style="padding:20px"):
        b.element("h1", "My Website")
    html = b.string()
"""

from collections.abc import Generator, Iterable
from contextlib import contextmanager
from typing import Protocol, runtime_checkable

from markupsafe import Markup, escape

# <input>, <hr> 등 닫는 태그가 없는 요소
VOID_ELEMENTS = frozenset(
    {"area", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source"}
)


def _attr_name(name: str) -> str:
    # class_ → class, http_equiv → http-equiv
    return name.rstrip("_").replace("_", "-")


def format_attrs(attrs: dict[str, object]) -> str:
    """속성 dict → ` key="value"` 문자열 (삽입 순서 유지, None 값 생략)."""
    parts = []
    for name, value in attrs.items():
        if value is None:
            continue
        parts.append(f' {_attr_name(name)}="{escape(value)}"')
    return "".join(parts)


class HtmlBuilder:
    """마크업 조각을 순서대로 쌓는 출력 버퍼."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def raw(self, markup: Markup) -> None:
        """신뢰된 마크업 그대로 추가."""
        self._parts.append(str(markup))

    def text(self, value: object) -> None:
        """escape된 텍스트 추가."""
        self._parts.append(str(escape(value)))

    def open(self, name: str, /, **attrs: object) -> None:
        self._parts.append(f"<{name}{format_attrs(attrs)}>")

    def close(self, name: str) -> None:
        self._parts.append(f"</{name}>")

    def void(self, name: str, /, **attrs: object) -> None:
        """닫는 태그 없는 요소 (input, img, hr)."""
        if name not in VOID_ELEMENTS:
            raise ValueError(f"<{name}> is not a void element")
        self.open(name, **attrs)

    @contextmanager
    def tag(self, name: str, /, **attrs: object) -> Generator[None, None, None]:
        """
        여는 태그 → (블록 안의 자식들) → 닫는 태그.

        블록에서 예외가 나면 닫는 태그를 쓰지 않는다.
        """
        self.open(name, **attrs)
        yield
        self.close(name)

    def element(self, name: str, content: object = "", /, **attrs: object) -> None:
        """텍스트 하나만 가진 요소. 빈 content → 빈 요소 (<textarea></textarea>)."""
        self.open(name, **attrs)
        self.text(content)
        self.close(name)

    def string(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.string()


# =============================================================================
# Renderable
# =============================================================================


@runtime_checkable
class Renderable(Protocol):
    """builder에 자기 마크업 조각을 append하는 컴포넌트."""

    def render(self, builder: HtmlBuilder) -> None: ...


def render_components(builder: HtmlBuilder, components: Iterable[Renderable]) -> None:
    """컴포넌트들을 주어진 순서대로 렌더링."""
    for component in components:
        component.render(builder)


def render_to_string(component: Renderable) -> str:
    """컴포넌트 하나를 새 builder에 렌더링해 문자열로 반환."""
    builder = HtmlBuilder()
    component.render(builder)
    return builder.string()
