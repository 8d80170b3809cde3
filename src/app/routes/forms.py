"""
Form Routes: 폼 데이터/경로 파라미터 echo (plain text).

- POST /post-form-data/{form_id}
- GET /greet/{name}
- GET /roh
"""

from fastapi import APIRouter, Form
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.post("/post-form-data/{form_id}", response_class=PlainTextResponse)
async def post_form_data(
    form_id: str,
    dept: str = Form(""),
    name: str = Form(""),
) -> PlainTextResponse:
    """
    폼 필드 + 경로 파라미터 echo.

    예:
        curl -X POST http://localhost:8000/post-form-data/123 -d "dept=engineering&name=JohnDoe"
        → Posted - form_id: 123, dept: engineering, name: JohnDoe
    """
    return PlainTextResponse(f"Posted - form_id: {form_id}, dept: {dept}, name: {name}")


@router.get("/greet/{name}", response_class=PlainTextResponse)
async def greet(name: str) -> PlainTextResponse:
    return PlainTextResponse(f"Hello {name}")


@router.get("/roh", response_class=PlainTextResponse)
async def roh() -> PlainTextResponse:
    return PlainTextResponse("Welcome to Roh!\n")
