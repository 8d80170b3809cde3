"""
업로드 파일 저장.

- 원자적 쓰기: temp → rename + fsync
- 동시 업로드 시 마지막으로 끝난 업로드가 남음 (부분 파일 노출 없음)
"""

import logging
import os
import tempfile
from pathlib import Path

from src.domain.errors import ErrorCodes, SiteError

logger = logging.getLogger(__name__)

UPLOAD_FILE_MODE = 0o644


def _fsync_dir(dir_path: Path) -> None:
    """디렉토리 fsync (rename 엔트리 내구성). 지원 안 되는 환경은 무시."""
    try:
        fd = os.open(dir_path, os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError as e:
        logger.debug(f"Directory fsync not supported for {dir_path}: {e}")
    finally:
        os.close(fd)


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    원자적 바이트 쓰기.

    동작:
    - 중간 상태 없음: temp → rename
    - 실패 시 cleanup: temp 파일 삭제
    - 기존 파일 보존: rename 실패 시 원본 유지

    Args:
        path: 저장할 파일 경로
        data: 파일 내용
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        # NamedTemporaryFile은 0600으로 생성됨
        os.chmod(temp_path, UPLOAD_FILE_MODE)
        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


def save_upload(data: bytes, output_path: Path) -> int:
    """
    업로드된 내용을 output_path에 저장.

    Returns:
        저장한 바이트 수

    Raises:
        SiteError: UPLOAD_WRITE_FAILED
    """
    try:
        atomic_write_bytes(output_path, data)
    except OSError as e:
        raise SiteError(
            ErrorCodes.UPLOAD_WRITE_FAILED,
            path=str(output_path),
            cause=str(e),
        ) from e

    logger.info(f"Saved upload: {output_path} ({len(data)} bytes)")
    return len(data)
