from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from fastapi import Depends

from nexjob.config import Settings, settings
from nexjob.database import PublicSessionLocal, SessionLocal
from nexjob.schemas.settings import SiteSettings
from nexjob.services.admin_settings import AdminSettingsService
from nexjob.services.advertisement import AdvertisementService
from nexjob.services.authorization import SuperAdminAuthorizer
from nexjob.services.settings_cache import SettingsCache
from nexjob.services.settings_store import SqlSettingsStore
from nexjob.services.wordpress import WordPressFilterClient

FilterClientFactory = Callable[[SiteSettings], WordPressFilterClient]


def build_settings_service(config: Settings = settings) -> AdminSettingsService:
    public_store = None
    if config.resolved_public_database_url != config.database_url:
        public_store = SqlSettingsStore(PublicSessionLocal, name="public")
    return AdminSettingsService(
        primary_store=SqlSettingsStore(SessionLocal, name="primary"),
        public_store=public_store,
        authorizer=SuperAdminAuthorizer(SessionLocal),
        cache=SettingsCache(ttl_seconds=config.settings_cache_ttl_seconds),
        fetch_timeout=config.settings_fetch_timeout_seconds,
        admin_check_timeout=config.admin_check_timeout_seconds,
        save_timeout=config.settings_save_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_settings_service() -> AdminSettingsService:
    return build_settings_service()


def get_advertisement_service(
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> AdvertisementService:
    return AdvertisementService(settings_service)


def _filter_client_for(site_settings: SiteSettings) -> WordPressFilterClient:
    return WordPressFilterClient(
        filters_api_url=site_settings.filters_api_url or settings.wp_filters_api_url,
        auth_token=site_settings.auth_token or "",
        timeout=settings.filters_timeout_seconds,
    )


def get_filter_client_factory() -> FilterClientFactory:
    return _filter_client_for
