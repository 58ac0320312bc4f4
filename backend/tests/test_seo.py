from conftest import stored_settings

from nexjob.schemas.settings import SiteSettings
from nexjob.services.identity import FilterData
from nexjob.services.seo import archive_page, category_page, location_page

BASE_URL = "https://nexjob.tech"
FILTERS = FilterData(
    categories=["Teknologi Informasi", "Food & Beverage"],
    provinces={"Jawa Barat": ["Bandung", "Bekasi"]},
)


def test_category_page_renders_templates_and_urls():
    meta = category_page("food-beverage", stored_settings(), FILTERS, BASE_URL)

    assert meta is not None
    assert meta.page_title == "Loker Food & Beverage | Nexjob Stored"
    assert meta.page_description == "Cari kerja Food & Beverage di Nexjob Stored"
    assert meta.canonical_entity_name == "Food & Beverage"
    assert meta.entity_type == "category"
    assert meta.canonical_url == "https://nexjob.tech/lowongan-kerja/"
    assert meta.og_url == "https://nexjob.tech/lowongan-kerja/kategori/food-beverage/"


def test_category_page_unknown_slug_is_none():
    assert category_page("unknown-slug", stored_settings(), FILTERS, BASE_URL) is None


def test_category_page_falls_back_to_default_template():
    settings = SiteSettings(site_title="Nexjob")
    meta = category_page("teknologi-informasi", settings, FILTERS, BASE_URL)
    assert meta.page_title == "Lowongan Kerja Teknologi Informasi - Nexjob"


def test_location_page_reports_city_type_and_heading():
    meta = location_page("bandung", stored_settings(), FILTERS, BASE_URL)

    assert meta.entity_type == "city"
    assert meta.canonical_entity_name == "Bandung"
    assert meta.page_title == "Loker di Bandung | Nexjob Stored"
    assert meta.canonical_url == "https://nexjob.tech/lowongan-kerja/lokasi/bandung/"


def test_location_page_heading_strips_site_title_suffix():
    settings = SiteSettings(site_title="Nexjob")
    meta = location_page("jawa-barat", settings, FILTERS, BASE_URL)

    assert meta.entity_type == "province"
    assert meta.page_title == "Lowongan Kerja di Jawa Barat - Nexjob"
    assert meta.heading == "Lowongan Kerja di Jawa Barat"


def test_location_page_fills_category_variable():
    settings = SiteSettings(site_title="Nexjob", location_page_title_template="{{kategori}} di {{lokasi}}")
    meta = location_page("bekasi", settings, FILTERS, BASE_URL, category="IT")
    assert meta.page_title == "IT di Bekasi"


def test_breadcrumb_schema_lists_home_then_trail():
    meta = location_page("bandung", stored_settings(), FILTERS, BASE_URL)
    elements = meta.breadcrumb_schema["itemListElement"]

    assert meta.breadcrumb_schema["@type"] == "BreadcrumbList"
    assert [element["name"] for element in elements] == ["Home", "Lowongan Kerja", "Lokasi: Bandung"]
    assert elements[1]["item"] == "https://nexjob.tech/lowongan-kerja/"
    assert "item" not in elements[2]


def test_archive_page_renders_site_title():
    meta = archive_page("jobs", stored_settings(), BASE_URL)

    assert meta.page_title == "Lowongan Kerja Terbaru - Nexjob Stored"
    assert meta.og_image == "https://nexjob.tech/og-jobs.jpg"
    assert meta.canonical_url == "https://nexjob.tech/lowongan-kerja/"


def test_archive_page_unknown_kind_is_none():
    assert archive_page("bookmarks", stored_settings(), BASE_URL) is None
