"""
Data schemas for the site.

- SiteSettings: default.yaml → 불변 설정값 (startup 시 1회 생성)
- HeadingPlacement: 페이지 heading 위치
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from src.domain import constants
from src.domain.errors import ErrorCodes, SiteError

# =============================================================================
# Heading Placement
# =============================================================================

class HeadingPlacement(str, Enum):
    """
    페이지 heading(<h1>) 위치.

    AFTER_FOOTER가 기존 출력과 같은 순서 (banner → body → footer → heading).
    """
    AFTER_FOOTER = "after_footer"
    BEFORE_BODY = "before_body"


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class ServerSettings:
    host: str = constants.DEFAULT_HOST
    port: int = constants.DEFAULT_PORT
    verbose: bool = True
    log_level: str = "INFO"


@dataclass(frozen=True)
class PageSettings:
    """페이지 하나의 title/heading."""
    title: str
    heading: str
    heading_placement: HeadingPlacement = HeadingPlacement.AFTER_FOOTER


@dataclass(frozen=True)
class UploadSettings:
    output_path: Path = Path(constants.UPLOAD_OUTPUT_FILENAME)


@dataclass(frozen=True)
class StaticSettings:
    well_known_dir: Path | None = Path(constants.WELL_KNOWN_DIR)


@dataclass(frozen=True)
class SiteSettings:
    """
    사이트 전체 설정.

    default.yaml 구조와 동일:
        server: {host, port, verbose, log_level}
        pages: {home: {title, heading, heading_placement}, contact: {...}}
        upload: {output_path}
        static: {well_known_dir}
    """
    server: ServerSettings = field(default_factory=ServerSettings)
    home: PageSettings = field(
        default_factory=lambda: PageSettings(
            title=constants.HOME_TITLE, heading=constants.HOME_HEADING
        )
    )
    contact: PageSettings = field(
        default_factory=lambda: PageSettings(
            title=constants.CONTACT_TITLE, heading=constants.CONTACT_HEADING
        )
    )
    upload: UploadSettings = field(default_factory=UploadSettings)
    static: StaticSettings = field(default_factory=StaticSettings)

    def to_dict(self) -> dict[str, Any]:
        """로그 출력용."""
        return {
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "verbose": self.server.verbose,
                "log_level": self.server.log_level,
            },
            "pages": {
                "home": _page_to_dict(self.home),
                "contact": _page_to_dict(self.contact),
            },
            "upload": {
                "output_path": str(self.upload.output_path),
            },
            "static": {
                "well_known_dir": (
                    str(self.static.well_known_dir)
                    if self.static.well_known_dir is not None
                    else None
                ),
            },
        }


def _page_to_dict(page: PageSettings) -> dict[str, str]:
    return {
        "title": page.title,
        "heading": page.heading,
        "heading_placement": page.heading_placement.value,
    }


# =============================================================================
# Config → Settings
# =============================================================================

def _section(config: dict[str, Any], key: str) -> dict[str, Any]:
    value = config.get(key) or {}
    if not isinstance(value, dict):
        raise SiteError(ErrorCodes.CONFIG_INVALID, section=key, value=value)
    return value


def _value(raw: dict[str, Any], key: str, default: Any) -> Any:
    """키가 없거나 null 이면 기본값."""
    value = raw.get(key)
    return default if value is None else value


def _page_settings(raw: dict[str, Any], name: str, default: PageSettings) -> PageSettings:
    placement = _value(raw, "heading_placement", default.heading_placement.value)
    try:
        heading_placement = HeadingPlacement(placement)
    except ValueError:
        raise SiteError(
            ErrorCodes.CONFIG_INVALID,
            section=f"pages.{name}.heading_placement",
            value=placement,
        ) from None

    return PageSettings(
        title=str(_value(raw, "title", default.title)),
        heading=str(_value(raw, "heading", default.heading)),
        heading_placement=heading_placement,
    )


def settings_from_config(config: dict[str, Any]) -> SiteSettings:
    """
    default.yaml dict → SiteSettings.

    없는 키는 기본값 사용.

    Raises:
        SiteError: CONFIG_INVALID (섹션이 dict가 아님, port가 정수가 아님,
            verbose가 bool이 아님, 알 수 없는 log_level, 잘못된 heading_placement)
    """
    defaults = SiteSettings()

    server = _section(config, "server")
    pages = _section(config, "pages")
    upload = _section(config, "upload")
    static = _section(config, "static")

    try:
        port = int(_value(server, "port", defaults.server.port))
    except (TypeError, ValueError):
        raise SiteError(
            ErrorCodes.CONFIG_INVALID, section="server.port", value=server.get("port")
        ) from None

    verbose = _value(server, "verbose", defaults.server.verbose)
    if not isinstance(verbose, bool):
        raise SiteError(ErrorCodes.CONFIG_INVALID, section="server.verbose", value=verbose)

    log_level = str(_value(server, "log_level", defaults.server.log_level)).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise SiteError(ErrorCodes.CONFIG_INVALID, section="server.log_level", value=log_level)

    # null 또는 "" → .well-known 비활성화
    well_known_dir = static.get("well_known_dir", str(defaults.static.well_known_dir))

    return SiteSettings(
        server=ServerSettings(
            host=str(_value(server, "host", defaults.server.host)),
            port=port,
            verbose=verbose,
            log_level=log_level,
        ),
        home=_page_settings(_section(pages, "home"), "home", defaults.home),
        contact=_page_settings(_section(pages, "contact"), "contact", defaults.contact),
        upload=UploadSettings(
            output_path=Path(_value(upload, "output_path", defaults.upload.output_path)),
        ),
        static=StaticSettings(
            well_known_dir=Path(well_known_dir) if well_known_dir else None,
        ),
    )
