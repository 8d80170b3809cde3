"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 직접: uv run python -m src.app.main
"""

import logging
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.app.components import build_pages
from src.app.routes import forms, pages, upload
from src.core.logging import configure_logging, format_request_line
from src.domain.constants import WELL_KNOWN_PREFIX
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import SiteSettings, settings_from_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SiteError(ErrorCodes.CONFIG_INVALID, path=str(config_path))
    return data


def load_settings(config_path: Path | None = None) -> SiteSettings:
    return settings_from_config(load_config(config_path))


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    페이지/설정은 create_app()에서 이미 app.state에 올라가 있음.
    """
    settings: SiteSettings = app.state.settings
    logger.info(f"Starting site on {settings.server.host}:{settings.server.port}")

    yield

    logger.info("Bye")


# =============================================================================
# Middleware / Error Handlers
# =============================================================================


def _register_request_logging(app: FastAPI, verbose: bool) -> None:
    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        if verbose:
            logger.debug(
                f"{request.method} {request.url.path} host={request.headers.get('host')} "
                f"headers={dict(request.headers)}"
            )

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            format_request_line(
                request.method, request.url.path, response.status_code, duration_ms
            )
        )
        return response


async def site_error_handler(request: Request, exc: SiteError) -> JSONResponse:
    """SiteError → JSON 응답 (400: 요청 문제, 500: 서버 문제)."""
    status_code = 400 if exc.is_client_error else 500
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: SiteSettings | None = None) -> FastAPI:
    """
    설정 → FastAPI 앱.

    페이지 인스턴스는 여기서 1회 생성되어 app.state.pages 로 전달된다.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.server.log_level)

    app = FastAPI(
        title="Form Exercise Site",
        description="Home / Contact 페이지, 폼 echo, 파일 업로드",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.pages = build_pages(settings)

    _register_request_logging(app, settings.server.verbose)
    app.add_exception_handler(SiteError, site_error_handler)

    app.include_router(pages.router, tags=["Pages"])
    app.include_router(forms.router, tags=["Forms"])
    app.include_router(upload.router, tags=["Upload"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    # /.well-known/<path> → <well_known_dir>/<path> (SSL 인증 파일 등)
    well_known_dir = settings.static.well_known_dir
    if well_known_dir is not None and well_known_dir.is_dir():
        app.mount(
            WELL_KNOWN_PREFIX,
            StaticFiles(directory=well_known_dir),
            name="well-known",
        )
    elif well_known_dir is not None:
        logger.warning(f"Static directory not found, {WELL_KNOWN_PREFIX} disabled: {well_known_dir}")

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=app.state.settings.server.host,
        port=app.state.settings.server.port,
    )
