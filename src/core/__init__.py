"""
Core layer: logging 설정, 업로드 파일 저장.
"""

from .logging import configure_logging, format_request_line
from .storage import atomic_write_bytes, save_upload

__all__ = [
    # logging
    "configure_logging",
    "format_request_line",
    # storage
    "atomic_write_bytes",
    "save_upload",
]
