from __future__ import annotations

import logging
from typing import Any

import httpx

from nexjob.services.identity import FilterData

logger = logging.getLogger(__name__)

CATEGORY_KEY = "nexjob_kategori_pekerjaan"
PROVINCE_KEY = "nexjob_lokasi_provinsi"


def parse_filters_payload(payload: dict[str, Any]) -> FilterData:
    raw_categories = payload.get(CATEGORY_KEY) or []
    raw_provinces = payload.get(PROVINCE_KEY) or {}

    categories = [str(item) for item in raw_categories if isinstance(item, str) and item.strip()]
    provinces: dict[str, list[str]] = {}
    if isinstance(raw_provinces, dict):
        for province, cities in raw_provinces.items():
            if not isinstance(province, str) or not province.strip():
                continue
            provinces[province] = [str(city) for city in (cities or []) if isinstance(city, str) and city.strip()]
    return FilterData(categories=categories, provinces=provinces)


class WordPressFilterClient:
    """Fetches the aggregated category / province / city names for job filters."""

    def __init__(self, filters_api_url: str, auth_token: str = "", timeout: float = 10.0) -> None:
        self.filters_api_url = filters_api_url
        self.auth_token = auth_token
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    async def get_filters_data(self) -> FilterData:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.get(self.filters_api_url, headers=self._headers())
            response.raise_for_status()
            payload = response.json()
        if not isinstance(payload, dict):
            logger.warning("Unexpected filters payload type from %s: %s", self.filters_api_url, type(payload).__name__)
            return FilterData()
        return parse_filters_payload(payload)
