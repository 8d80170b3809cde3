"""
Error definitions for the site.

규칙:
- 조용한 실패 금지 → SiteError로 명시적 실패
- 핸들러는 에러를 감싸지 않고 그대로 올린다 (app의 exception handler가 응답으로 변환)
"""

from typing import Any


class SiteError(Exception):
    """
    요청 처리 중 실패 시 발생하는 에러.

    Usage:
        raise SiteError(ErrorCodes.UPLOAD_WRITE_FAILED, path="uploaded_file.txt", cause=str(e))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    @property
    def is_client_error(self) -> bool:
        """요청 쪽 문제인지 (400) 서버 쪽 문제인지 (500)."""
        return self.code in ErrorCodes.CLIENT_ERRORS

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Upload ===
    UPLOAD_FILE_MISSING = "UPLOAD_FILE_MISSING"
    UPLOAD_WRITE_FAILED = "UPLOAD_WRITE_FAILED"

    # === Config ===
    CONFIG_INVALID = "CONFIG_INVALID"

    CLIENT_ERRORS = frozenset({UPLOAD_FILE_MISSING})
