import asyncio

from conftest import DEFAULTS, FakeAuthorizer, FakeClock, FakeStore, make_service, stored_settings

from nexjob.errors import NETWORK_MESSAGE, TIMEOUT_MESSAGE, UNAUTHORIZED_MESSAGE, NetworkError, SettingsPermissionError, TransientStorageError
from nexjob.schemas.settings import SiteSettingsUpdate


def test_second_read_within_ttl_uses_cache():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    first = asyncio.run(service.get_settings())
    second = asyncio.run(service.get_settings())

    assert first.site_title == "Nexjob Stored"
    assert second is first
    assert store.fetch_calls == 1


def test_read_after_ttl_fetches_again():
    clock = FakeClock()
    store = FakeStore(row=stored_settings())
    service = make_service(store, clock=clock)

    asyncio.run(service.get_settings())
    clock.advance(121)
    asyncio.run(service.get_settings())

    assert store.fetch_calls == 2


def test_force_refresh_and_admin_context_bypass_cache():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    asyncio.run(service.get_settings())
    asyncio.run(service.get_settings(force_refresh=True))
    asyncio.run(service.get_settings(admin_context=True))

    assert store.fetch_calls == 3


def test_admin_context_does_not_populate_cache():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    asyncio.run(service.get_settings(admin_context=True))
    asyncio.run(service.get_settings())

    assert store.fetch_calls == 2


def test_timeout_without_cache_returns_defaults():
    store = FakeStore(row=stored_settings(), delay=0.2)
    service = make_service(store, fetch_timeout=0.01)

    result = asyncio.run(service.get_settings())

    assert result == DEFAULTS


def test_permission_error_falls_back_to_public_store_without_caching():
    primary = FakeStore(error=SettingsPermissionError("permission denied for table admin_settings"))
    public = FakeStore(row=stored_settings(site_title="Public Copy"))
    service = make_service(primary, public=public)

    first = asyncio.run(service.get_settings())
    second = asyncio.run(service.get_settings())

    assert first.site_title == "Public Copy"
    assert second.site_title == "Public Copy"
    assert primary.fetch_calls == 2
    assert public.fetch_calls == 2


def test_timeout_falls_back_to_public_store():
    primary = FakeStore(row=stored_settings(), delay=0.2)
    public = FakeStore(row=stored_settings(site_title="Public Copy"))
    service = make_service(primary, public=public, fetch_timeout=0.05)

    assert asyncio.run(service.get_settings()).site_title == "Public Copy"


def test_other_storage_errors_skip_public_store():
    primary = FakeStore(error=TransientStorageError("relation does not exist"))
    public = FakeStore(row=stored_settings(site_title="Public Copy"))
    service = make_service(primary, public=public)

    assert asyncio.run(service.get_settings()) == DEFAULTS
    assert public.fetch_calls == 0


def test_public_store_failure_returns_defaults():
    primary = FakeStore(error=SettingsPermissionError("permission denied"))
    public = FakeStore(error=SettingsPermissionError("permission denied"))
    service = make_service(primary, public=public)

    assert asyncio.run(service.get_settings()) == DEFAULTS


def test_stale_cache_is_preferred_over_defaults_on_failure():
    clock = FakeClock()
    store = FakeStore(row=stored_settings())
    service = make_service(store, clock=clock)

    fresh = asyncio.run(service.get_settings())
    clock.advance(300)
    store.error = NetworkError("could not connect to server")

    assert asyncio.run(service.get_settings()) is fresh


def test_empty_table_returns_defaults_and_is_not_cached():
    store = FakeStore(row=None)
    service = make_service(store)

    assert asyncio.run(service.get_settings()) == DEFAULTS
    asyncio.run(service.get_settings())
    assert store.fetch_calls == 2


def test_unexpected_exception_never_escapes():
    store = FakeStore(error=RuntimeError("boom"))
    service = make_service(store)

    assert asyncio.run(service.get_settings()) == DEFAULTS


def test_save_by_non_super_admin_is_rejected_without_writing():
    store = FakeStore(row=stored_settings())
    service = make_service(store, authorizer=FakeAuthorizer(allowed=False))

    result = asyncio.run(service.save_settings({"site_title": "Hacked"}, user_id=5))

    assert result.success is False
    assert result.error == UNAUTHORIZED_MESSAGE
    assert store.updates == []
    assert store.inserts == []


def test_successful_save_updates_existing_row_and_clears_cache():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    asyncio.run(service.get_settings())
    result = asyncio.run(service.save_settings(SiteSettingsUpdate(site_title="Renamed"), user_id=1))
    refreshed = asyncio.run(service.get_settings())

    assert result.success is True
    assert store.updates == [(7, {"site_title": "Renamed"})]
    assert store.fetch_calls == 2
    assert refreshed.site_title == "Renamed"


def test_save_without_existing_row_inserts_defaults_merged_with_partial():
    store = FakeStore(row=None)
    service = make_service(store)

    result = asyncio.run(service.save_settings({"popup_ad_code": "<script></script>", "id": 99}, user_id=1))

    assert result.success is True
    assert len(store.inserts) == 1
    inserted = store.inserts[0]
    assert inserted["popup_ad_code"] == "<script></script>"
    assert inserted["site_title"] == DEFAULTS.site_title
    assert "id" not in inserted


def test_save_classifies_timeouts():
    store = FakeStore(row=stored_settings())
    service = make_service(store, authorizer=FakeAuthorizer(delay=0.2), admin_check_timeout=0.01)

    result = asyncio.run(service.save_settings({"site_title": "Slow"}, user_id=1))

    assert result.success is False
    assert result.error == TIMEOUT_MESSAGE
    assert store.updates == []


def test_save_classifies_network_and_passes_other_messages_through():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    store.write_error = NetworkError("connection reset")
    network = asyncio.run(service.save_settings({"site_title": "X"}, user_id=1))
    store.write_error = TransientStorageError("value too long for column")
    other = asyncio.run(service.save_settings({"site_title": "X"}, user_id=1))

    assert network.error == NETWORK_MESSAGE
    assert other.error == "value too long for column"


def test_sitemap_timestamp_update_requires_super_admin():
    store = FakeStore(row=stored_settings())
    service = make_service(store, authorizer=FakeAuthorizer(allowed=False))

    asyncio.run(service.update_last_sitemap_generation(user_id=3))

    assert store.updates == []


def test_sitemap_timestamp_update_clears_cache():
    store = FakeStore(row=stored_settings())
    service = make_service(store)

    asyncio.run(service.get_settings())
    asyncio.run(service.update_last_sitemap_generation(user_id=1))
    asyncio.run(service.get_settings())

    assert list(store.updates[0][1]) == ["last_sitemap_update"]
    assert store.fetch_calls == 2


class BrokenAuthorizer:
    async def is_super_admin(self, user_id):
        raise RuntimeError("no such column: users.role")


def test_sitemap_timestamp_update_swallows_unexpected_errors():
    store = FakeStore(row=stored_settings())
    service = make_service(store, authorizer=BrokenAuthorizer())

    asyncio.run(service.get_settings())
    asyncio.run(service.update_last_sitemap_generation(user_id=1))

    assert store.updates == []
    assert service.cache.get() is not None
