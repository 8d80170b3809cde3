"""
Logging: stdlib logging 설정 + 요청 로그 포맷.

- configure_logging(): startup 시 1회 호출
- format_request_line(): GET "/path" -> 200 [1.2ms]
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    root logger 설정.

    이미 handler가 있으면 (uvicorn, pytest 등) level만 맞춘다.

    Args:
        level: "DEBUG", "INFO", ...
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)


def format_request_line(method: str, path: str, status: int, duration_ms: float) -> str:
    """
    요청 로그 한 줄.

    Returns:
        예: 'GET "/contact" -> 200 [1.2ms]'
    """
    return f'{method} "{path}" -> {status} [{duration_ms:.1f}ms]'
