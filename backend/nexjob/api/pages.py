from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from nexjob.dependencies import FilterClientFactory, get_filter_client_factory, get_settings_service
from nexjob.schemas.page import PageMeta
from nexjob.schemas.settings import SiteSettings
from nexjob.services.admin_settings import AdminSettingsService
from nexjob.services.defaults import render_robots_txt
from nexjob.services.identity import FilterData
from nexjob.services.seo import archive_page, category_page, location_page


logger = logging.getLogger(__name__)
router = APIRouter()
robots_router = APIRouter()


def _request_base_url(request: Request) -> str:
    protocol = request.headers.get("x-forwarded-proto") or request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    return f"{protocol}://{host}"


async def _load_filters(site_settings: SiteSettings, client_factory: FilterClientFactory) -> FilterData:
    try:
        return await client_factory(site_settings).get_filters_data()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Error loading filter data: %s", exc)
        raise HTTPException(status_code=404, detail="Page not found") from exc


@router.get("/kategori/{slug}", response_model=PageMeta)
async def category_page_meta(
    slug: str,
    request: Request,
    location: str | None = Query(default=None),
    settings_service: AdminSettingsService = Depends(get_settings_service),
    client_factory: FilterClientFactory = Depends(get_filter_client_factory),
) -> PageMeta:
    site_settings = await settings_service.get_settings()
    filters = await _load_filters(site_settings, client_factory)
    meta = category_page(slug, site_settings, filters, _request_base_url(request), location=location)
    if meta is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return meta


@router.get("/lokasi/{slug}", response_model=PageMeta)
async def location_page_meta(
    slug: str,
    request: Request,
    category: str | None = Query(default=None),
    settings_service: AdminSettingsService = Depends(get_settings_service),
    client_factory: FilterClientFactory = Depends(get_filter_client_factory),
) -> PageMeta:
    site_settings = await settings_service.get_settings()
    filters = await _load_filters(site_settings, client_factory)
    meta = location_page(slug, site_settings, filters, _request_base_url(request), category=category)
    if meta is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return meta


@router.get("/archive/{kind}", response_model=PageMeta)
async def archive_page_meta(
    kind: str,
    request: Request,
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> PageMeta:
    site_settings = await settings_service.get_settings()
    meta = archive_page(kind, site_settings, _request_base_url(request))
    if meta is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return meta


@robots_router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(
    request: Request,
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> str:
    site_settings = await settings_service.get_settings()
    return site_settings.robots_txt or render_robots_txt(site_settings.site_url or _request_base_url(request))
