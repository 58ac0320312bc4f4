from nexjob.schemas.auth import AuthResponse, LoginRequest, MeResponse
from nexjob.schemas.page import AdCodeResponse, BreadcrumbItem, PageMeta
from nexjob.schemas.settings import SaveSettingsResponse, SiteSettings, SiteSettingsUpdate

__all__ = [
    "LoginRequest",
    "AuthResponse",
    "MeResponse",
    "BreadcrumbItem",
    "PageMeta",
    "AdCodeResponse",
    "SiteSettings",
    "SiteSettingsUpdate",
    "SaveSettingsResponse",
]
