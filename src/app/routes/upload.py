"""
Upload Route: multipart 파일 업로드.

POST /upload
- vehicle: 텍스트 필드 (로그만)
- file: 업로드 파일 → settings.upload.output_path 에 저장

전체 내용을 메모리로 읽은 뒤 저장 (스트리밍/크기 제한 없음).

예:
    curl -X POST -F "vehicle=car" -F "file=@somefile.txt" http://localhost:8000/upload
"""

import logging

from fastapi import APIRouter, File, Form, Request, Response, UploadFile

from src.core.storage import save_upload
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import SiteSettings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload")
async def upload_file(
    request: Request,
    vehicle: str = Form(""),
    file: UploadFile | None = File(None),
) -> Response:
    """
    파일 업로드.

    Raises:
        SiteError: UPLOAD_FILE_MISSING (file 필드 없음), UPLOAD_WRITE_FAILED (저장 실패)
    """
    settings: SiteSettings = request.app.state.settings
    logger.info(f"vehicle: {vehicle}")

    if file is None:
        raise SiteError(ErrorCodes.UPLOAD_FILE_MISSING, field="file")

    try:
        data = await file.read()
    finally:
        await file.close()

    save_upload(data, settings.upload.output_path)
    return Response(status_code=200)
