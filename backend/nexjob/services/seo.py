from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nexjob.schemas.page import BreadcrumbItem, PageMeta
from nexjob.schemas.settings import SiteSettings
from nexjob.services.defaults import (
    DEFAULT_CATEGORY_DESCRIPTION_TEMPLATE,
    DEFAULT_CATEGORY_TITLE_TEMPLATE,
    DEFAULT_LOCATION_DESCRIPTION_TEMPLATE,
    DEFAULT_LOCATION_TITLE_TEMPLATE,
)
from nexjob.services.identity import FilterData, resolve_category, resolve_location
from nexjob.services.templating import render_template

JOBS_PATH = "/lowongan-kerja/"


@dataclass(frozen=True)
class ArchivePage:
    title_field: str
    description_field: str
    og_image_field: str
    path: str
    label: str


ARCHIVE_PAGES: dict[str, ArchivePage] = {
    "jobs": ArchivePage("jobs_title", "jobs_description", "jobs_og_image", JOBS_PATH, "Lowongan Kerja"),
    "articles": ArchivePage("articles_title", "articles_description", "articles_og_image", "/artikel/", "Artikel"),
    "login": ArchivePage("login_page_title", "login_page_description", "home_og_image", "/login/", "Login"),
    "signup": ArchivePage("signup_page_title", "signup_page_description", "home_og_image", "/signup/", "Daftar"),
    "profile": ArchivePage("profile_page_title", "profile_page_description", "home_og_image", "/profile/", "Profil"),
}


def breadcrumb_schema(items: list[BreadcrumbItem], base_url: str) -> dict[str, Any]:
    elements: list[dict[str, Any]] = [
        {"@type": "ListItem", "position": 1, "name": "Home", "item": f"{base_url}/"},
    ]
    for position, item in enumerate(items, start=2):
        element: dict[str, Any] = {"@type": "ListItem", "position": position, "name": item.label}
        if item.href:
            element["item"] = f"{base_url}{item.href}"
        elements.append(element)
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def _template_vars(settings: SiteSettings, **extra: str | None) -> dict[str, str]:
    variables = {"site_title": settings.site_title or ""}
    for key, value in extra.items():
        variables[key] = value or ""
    return variables


def category_page(
    slug: str,
    settings: SiteSettings,
    filters: FilterData,
    base_url: str,
    location: str | None = None,
) -> PageMeta | None:
    category = resolve_category(slug, filters.categories)
    if category is None:
        return None

    variables = _template_vars(settings, kategori=category, lokasi=location)
    breadcrumbs = [
        BreadcrumbItem(label="Lowongan Kerja", href=JOBS_PATH),
        BreadcrumbItem(label=f"Kategori: {category}"),
    ]
    return PageMeta(
        page_title=render_template(settings.category_page_title_template or DEFAULT_CATEGORY_TITLE_TEMPLATE, variables),
        page_description=render_template(
            settings.category_page_description_template or DEFAULT_CATEGORY_DESCRIPTION_TEMPLATE, variables
        ),
        canonical_entity_name=category,
        entity_type="category",
        # Category listings share the archive as their canonical page.
        canonical_url=f"{base_url}{JOBS_PATH}",
        og_url=f"{base_url}{JOBS_PATH}kategori/{slug}/",
        og_image=settings.jobs_og_image,
        breadcrumbs=breadcrumbs,
        breadcrumb_schema=breadcrumb_schema(breadcrumbs, base_url),
    )


def location_page(
    slug: str,
    settings: SiteSettings,
    filters: FilterData,
    base_url: str,
    category: str | None = None,
) -> PageMeta | None:
    match = resolve_location(slug, filters.provinces)
    if match is None:
        return None

    variables = _template_vars(settings, lokasi=match.name, kategori=category)
    page_title = render_template(settings.location_page_title_template or DEFAULT_LOCATION_TITLE_TEMPLATE, variables)
    heading = page_title.replace(f" - {variables['site_title']}", "") or f"Lowongan Kerja di {match.name}"
    breadcrumbs = [
        BreadcrumbItem(label="Lowongan Kerja", href=JOBS_PATH),
        BreadcrumbItem(label=f"Lokasi: {match.name}"),
    ]
    page_url = f"{base_url}{JOBS_PATH}lokasi/{slug}/"
    return PageMeta(
        page_title=page_title,
        page_description=render_template(
            settings.location_page_description_template or DEFAULT_LOCATION_DESCRIPTION_TEMPLATE, variables
        ),
        heading=heading,
        canonical_entity_name=match.name,
        entity_type=match.type,
        canonical_url=page_url,
        og_url=page_url,
        og_image=settings.jobs_og_image,
        breadcrumbs=breadcrumbs,
        breadcrumb_schema=breadcrumb_schema(breadcrumbs, base_url),
    )


def archive_page(kind: str, settings: SiteSettings, base_url: str) -> PageMeta | None:
    page = ARCHIVE_PAGES.get(kind)
    if page is None:
        return None

    variables = _template_vars(settings)
    breadcrumbs = [BreadcrumbItem(label=page.label)]
    page_url = f"{base_url}{page.path}"
    return PageMeta(
        page_title=render_template(getattr(settings, page.title_field) or "", variables),
        page_description=render_template(getattr(settings, page.description_field) or "", variables),
        entity_type="archive",
        canonical_url=page_url,
        og_url=page_url,
        og_image=getattr(settings, page.og_image_field) or f"{base_url}/og-{kind}.jpg",
        breadcrumbs=breadcrumbs,
        breadcrumb_schema=breadcrumb_schema(breadcrumbs, base_url),
    )
