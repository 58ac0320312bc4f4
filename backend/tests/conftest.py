from __future__ import annotations

import asyncio
from typing import Any

import pytest

from nexjob.schemas.settings import SiteSettings
from nexjob.services.admin_settings import AdminSettingsService
from nexjob.services.settings_cache import SettingsCache


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeStore:
    def __init__(self, row: SiteSettings | None = None, error: Exception | None = None, delay: float = 0.0) -> None:
        self.row = row
        self.error = error
        self.delay = delay
        self.fetch_calls = 0
        self.updates: list[tuple[int, dict[str, Any]]] = []
        self.inserts: list[dict[str, Any]] = []
        self.write_error: Exception | None = None

    async def fetch_latest(self) -> SiteSettings | None:
        self.fetch_calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.row

    async def fetch_latest_id(self) -> int | None:
        if self.error is not None:
            raise self.error
        return self.row.id if self.row else None

    async def update(self, settings_id: int, values: dict[str, Any]) -> SiteSettings:
        if self.write_error is not None:
            raise self.write_error
        self.updates.append((settings_id, values))
        self.row = self.row.model_copy(update=values)
        return self.row

    async def insert(self, values: dict[str, Any]) -> SiteSettings:
        if self.write_error is not None:
            raise self.write_error
        self.inserts.append(values)
        self.row = SiteSettings(id=1, **values)
        return self.row


class FakeAuthorizer:
    def __init__(self, allowed: bool = True, delay: float = 0.0) -> None:
        self.allowed = allowed
        self.delay = delay
        self.calls: list[int | None] = []

    async def is_super_admin(self, user_id: int | None) -> bool:
        self.calls.append(user_id)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.allowed


DEFAULTS = SiteSettings(
    site_title="Nexjob",
    site_url="https://nexjob.tech",
    category_page_title_template="Lowongan Kerja {{kategori}} - {{site_title}}",
    location_page_title_template="Lowongan Kerja di {{lokasi}} - {{site_title}}",
    popup_ad_code="",
)


def stored_settings(**overrides: Any) -> SiteSettings:
    values: dict[str, Any] = {
        "id": 7,
        "site_title": "Nexjob Stored",
        "site_url": "https://nexjob.tech",
        "category_page_title_template": "Loker {{kategori}} | {{site_title}}",
        "category_page_description_template": "Cari kerja {{kategori}} di {{site_title}}",
        "location_page_title_template": "Loker di {{lokasi}} | {{site_title}}",
        "location_page_description_template": "Cari kerja di {{lokasi}}",
        "jobs_title": "Lowongan Kerja Terbaru - {{site_title}}",
        "jobs_description": "Semua lowongan di {{site_title}}",
        "jobs_og_image": "https://nexjob.tech/og-jobs.jpg",
        "single_middle_ad_code": "<ins>ad</ins>",
    }
    values.update(overrides)
    return SiteSettings(**values)


def make_service(
    primary: FakeStore,
    public: FakeStore | None = None,
    authorizer: FakeAuthorizer | None = None,
    clock: FakeClock | None = None,
    fetch_timeout: float = 15.0,
    admin_check_timeout: float = 10.0,
) -> AdminSettingsService:
    return AdminSettingsService(
        primary_store=primary,
        public_store=public,
        authorizer=authorizer or FakeAuthorizer(),
        cache=SettingsCache(ttl_seconds=120, clock=clock or FakeClock()),
        defaults_factory=lambda: DEFAULTS,
        fetch_timeout=fetch_timeout,
        admin_check_timeout=admin_check_timeout,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
