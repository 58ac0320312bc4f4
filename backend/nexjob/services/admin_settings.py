from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from nexjob.errors import (
    UNAUTHORIZED_MESSAGE,
    SettingsError,
    SettingsPermissionError,
    SettingsTimeout,
    describe_save_error,
)
from nexjob.schemas.settings import SiteSettings, SiteSettingsFields, SiteSettingsUpdate
from nexjob.services.authorization import Authorizer
from nexjob.services.defaults import default_site_settings
from nexjob.services.settings_cache import SettingsCache
from nexjob.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_WRITABLE_FIELDS = frozenset(SiteSettingsFields.model_fields)


@dataclass(frozen=True)
class SaveResult:
    success: bool
    error: str | None = None


@dataclass(frozen=True)
class FetchStrategy:
    """One read tier. ``fetch`` receives the error raised by the previous failing tier."""

    name: str
    fetch: Callable[[Exception | None], Awaitable[SiteSettings | None]]


async def first_success(strategies: Sequence[FetchStrategy]) -> tuple[str, SiteSettings] | None:
    last_error: Exception | None = None
    for strategy in strategies:
        try:
            result = await strategy.fetch(last_error)
        except SettingsError as exc:
            logger.warning("Settings tier %r failed: %s", strategy.name, exc)
            last_error = exc
            continue
        except Exception as exc:
            logger.exception("Unexpected error in settings tier %r", strategy.name)
            last_error = exc
            continue
        if result is not None:
            return strategy.name, result
    return None


async def with_timeout(awaitable: Awaitable[T], seconds: float, label: str) -> T:
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as exc:
        raise SettingsTimeout(f"{label} timeout") from exc


class AdminSettingsService:
    def __init__(
        self,
        primary_store: SettingsStore,
        public_store: SettingsStore | None,
        authorizer: Authorizer,
        cache: SettingsCache | None = None,
        defaults_factory: Callable[[], SiteSettings] = default_site_settings,
        fetch_timeout: float = 15.0,
        admin_check_timeout: float = 10.0,
        lookup_timeout: float = 10.0,
        save_timeout: float = 15.0,
    ) -> None:
        self.primary_store = primary_store
        self.public_store = public_store
        self.authorizer = authorizer
        self.cache = cache if cache is not None else SettingsCache()
        self.defaults_factory = defaults_factory
        self.fetch_timeout = fetch_timeout
        self.admin_check_timeout = admin_check_timeout
        self.lookup_timeout = lookup_timeout
        self.save_timeout = save_timeout

    def default_settings(self) -> SiteSettings:
        return self.defaults_factory()

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Settings cache cleared")

    async def is_super_admin(self, user_id: int | None) -> bool:
        """Bounded super-admin check; raises ``SettingsTimeout`` when the lookup hangs."""
        return await with_timeout(
            self.authorizer.is_super_admin(user_id), self.admin_check_timeout, "Super admin check"
        )

    async def get_settings(self, force_refresh: bool = False, admin_context: bool = False) -> SiteSettings:
        """Return the active settings; never raises.

        Tiers in order: fresh cache, primary store, public store (only after a
        permission error or timeout on the primary), stale cache, defaults.
        The admin back-office always reads fresh data and never fills the cache.
        """
        use_cache = not force_refresh and not admin_context

        async def from_cache(_previous: Exception | None) -> SiteSettings | None:
            if not use_cache:
                return None
            cached = self.cache.get()
            if cached is not None:
                logger.debug("Using cached settings")
            return cached

        async def from_primary(_previous: Exception | None) -> SiteSettings | None:
            logger.info("Fetching fresh settings from database")
            data = await with_timeout(self.primary_store.fetch_latest(), self.fetch_timeout, "Database query")
            if data is None:
                logger.warning("No admin settings found, using defaults")
                return None
            if not admin_context:
                self.cache.set(data)
            return data

        async def from_public(previous: Exception | None) -> SiteSettings | None:
            if self.public_store is None:
                return None
            if not isinstance(previous, (SettingsPermissionError, SettingsTimeout)):
                return None
            logger.info("Retrying settings fetch with public access")
            return await with_timeout(self.public_store.fetch_latest(), self.fetch_timeout, "Public query")

        async def from_stale_cache(_previous: Exception | None) -> SiteSettings | None:
            stale = self.cache.get_stale()
            if stale is not None:
                logger.info("Returning cached settings due to error")
            return stale

        async def from_defaults(_previous: Exception | None) -> SiteSettings | None:
            logger.info("Returning default settings")
            return self.default_settings()

        resolved = await first_success(
            [
                FetchStrategy("cache", from_cache),
                FetchStrategy("primary", from_primary),
                FetchStrategy("public", from_public),
                FetchStrategy("stale-cache", from_stale_cache),
                FetchStrategy("defaults", from_defaults),
            ]
        )
        if resolved is None:
            return self.default_settings()
        return resolved[1]

    async def save_settings(self, partial: SiteSettingsUpdate | dict[str, Any], user_id: int | None) -> SaveResult:
        values = self._writable_values(partial)
        try:
            authorized = await self.is_super_admin(user_id)
            if not authorized:
                logger.warning("Rejected settings save for user %s: not a super admin", user_id)
                return SaveResult(success=False, error=UNAUTHORIZED_MESSAGE)

            existing_id = await self._latest_id_or_none()
            if existing_id is not None:
                await with_timeout(
                    self.primary_store.update(existing_id, values), self.save_timeout, "Save operation"
                )
            else:
                seed = self.default_settings().model_dump(include=set(_WRITABLE_FIELDS))
                seed.update(values)
                await with_timeout(self.primary_store.insert(seed), self.save_timeout, "Save operation")
        except Exception as exc:
            logger.error("Error saving admin settings: %s", exc)
            return SaveResult(success=False, error=describe_save_error(exc))

        self.clear_cache()
        logger.info("Settings saved successfully")
        return SaveResult(success=True)

    async def update_last_sitemap_generation(self, user_id: int | None) -> None:
        try:
            if not await self.is_super_admin(user_id):
                return
            existing_id = await with_timeout(
                self.primary_store.fetch_latest_id(), self.lookup_timeout, "Existing settings query"
            )
            if existing_id is None:
                return
            await with_timeout(
                self.primary_store.update(existing_id, {"last_sitemap_update": datetime.utcnow()}),
                self.save_timeout,
                "Sitemap timestamp update",
            )
        except Exception as exc:
            logger.error("Error updating sitemap timestamp: %s", exc)
            return
        self.clear_cache()

    async def _latest_id_or_none(self) -> int | None:
        try:
            return await with_timeout(
                self.primary_store.fetch_latest_id(), self.lookup_timeout, "Existing settings query"
            )
        except SettingsError as exc:
            logger.warning("Error getting existing settings, will try to insert: %s", exc)
            return None

    @staticmethod
    def _writable_values(partial: SiteSettingsUpdate | dict[str, Any]) -> dict[str, Any]:
        if isinstance(partial, SiteSettingsUpdate):
            raw = partial.model_dump(exclude_unset=True)
        else:
            raw = dict(partial)
        return {key: value for key, value in raw.items() if key in _WRITABLE_FIELDS}
