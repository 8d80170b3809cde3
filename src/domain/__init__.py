"""Domain layer: errors, constants and settings schemas."""

from .errors import ErrorCodes, SiteError
from .schemas import (
    HeadingPlacement,
    PageSettings,
    ServerSettings,
    SiteSettings,
    StaticSettings,
    UploadSettings,
    settings_from_config,
)

__all__ = [
    "ErrorCodes",
    "SiteError",
    "HeadingPlacement",
    "PageSettings",
    "ServerSettings",
    "SiteSettings",
    "StaticSettings",
    "UploadSettings",
    "settings_from_config",
]
