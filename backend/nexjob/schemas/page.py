from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class BreadcrumbItem(BaseModel):
    label: str
    href: str | None = None


class PageMeta(BaseModel):
    page_title: str
    page_description: str
    heading: str | None = None
    canonical_entity_name: str | None = None
    entity_type: Literal["category", "province", "city", "archive"]
    canonical_url: str
    og_url: str
    og_image: str | None = None
    breadcrumbs: list[BreadcrumbItem] = Field(default_factory=list)
    breadcrumb_schema: dict[str, Any] = Field(default_factory=dict)


class AdCodeResponse(BaseModel):
    position: str
    ad_code: str
