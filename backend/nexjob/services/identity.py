from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal

from nexjob.services.slug import normalize_slug

LocationType = Literal["province", "city"]


@dataclass(frozen=True)
class FilterData:
    """Canonical names taken from the job API's aggregated filter data."""

    categories: list[str] = field(default_factory=list)
    provinces: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class LocationMatch:
    name: str
    type: LocationType


@dataclass(frozen=True)
class CategoryMatch:
    name: str
    type: Literal["category"] = "category"


def _first_match(slug: str, names: Iterable[str]) -> str | None:
    for name in names:
        if normalize_slug(name) == slug:
            return name
    return None


def resolve_category(slug: str, categories: Sequence[str]) -> str | None:
    if not slug:
        return None
    return _first_match(slug, categories)


def resolve_location(slug: str, provinces: Mapping[str, Sequence[str]]) -> LocationMatch | None:
    # Provinces are checked before any city, so a province wins a slug collision.
    if not slug:
        return None
    province = _first_match(slug, provinces.keys())
    if province is not None:
        return LocationMatch(name=province, type="province")
    for cities in provinces.values():
        city = _first_match(slug, cities)
        if city is not None:
            return LocationMatch(name=city, type="city")
    return None


def resolve_by_slug(
    slug: str,
    candidates: FilterData,
    namespace: Literal["category", "location"],
) -> CategoryMatch | LocationMatch | None:
    if namespace == "category":
        name = resolve_category(slug, candidates.categories)
        return CategoryMatch(name=name) if name is not None else None
    return resolve_location(slug, candidates.provinces)
