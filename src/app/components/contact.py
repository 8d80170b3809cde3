"""
Contact 페이지: 문의 폼 + 제출 결과 화면.
"""

from dataclasses import dataclass

from src.app.components.shared import ComposedPage, PageHeading
from src.render.html import HtmlBuilder, Renderable

CONTACT_ACTION = "/contact"
RECEIPT_BODY_STYLE = "background-color:darkgreen"


@dataclass(frozen=True)
class ContactForm:
    """name / email / message 입력 + Send 버튼. POST /contact 로 전송."""

    action: str = CONTACT_ACTION

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("form", action=self.action, method="POST"):
            builder.void("input", type="text", name="name", placeholder="Name")
            builder.void("input", type="email", name="email", placeholder="Email")
            builder.element("textarea", name="message", placeholder="Message")
            builder.element("button", "Send", type="submit")


@dataclass(frozen=True)
class ContactPage(ComposedPage):
    """Contact = chrome + ContactForm."""

    def body(self) -> Renderable:
        return ContactForm()


@dataclass(frozen=True)
class ContactReceipt:
    """POST /contact 응답: 받은 값을 그대로 보여준다 (escape 적용)."""

    name: str
    email: str
    message: str

    def summary(self) -> str:
        return f"Posted - name: {self.name}, email: {self.email}, message: {self.message}"

    def render(self, builder: HtmlBuilder) -> None:
        with builder.tag("body", style=RECEIPT_BODY_STYLE):
            PageHeading("Welcome").render(builder)
            builder.void("hr")
            builder.element("p", self.summary())
