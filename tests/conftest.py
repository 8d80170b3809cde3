"""
Pytest fixtures for the site tests.

- settings: 업로드/정적 파일 경로를 tmp_path로 돌린 SiteSettings
- client: create_app(settings) 기반 TestClient
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.domain.schemas import ServerSettings, SiteSettings, StaticSettings, UploadSettings

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def well_known_dir(tmp_path: Path) -> Path:
    """/.well-known 으로 서빙할 디렉토리."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "security.txt").write_text("Contact: mailto:security@example.com\n")
    return static_dir.resolve()


@pytest.fixture
def upload_path(tmp_path: Path) -> Path:
    """업로드 저장 경로."""
    return tmp_path / "uploads" / "uploaded_file.txt"


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings(well_known_dir: Path, upload_path: Path) -> SiteSettings:
    """테스트용 설정 (페이지는 기본값)."""
    return SiteSettings(
        server=ServerSettings(verbose=False),
        upload=UploadSettings(output_path=upload_path),
        static=StaticSettings(well_known_dir=well_known_dir),
    )


@pytest.fixture
def client(settings: SiteSettings) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(create_app(settings)) as client:
        yield client
