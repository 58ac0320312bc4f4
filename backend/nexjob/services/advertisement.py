from __future__ import annotations

import logging
import re

from jinja2 import Template

from nexjob.services.admin_settings import AdminSettingsService

logger = logging.getLogger(__name__)

AD_POSITIONS = (
    "popup_ad_code",
    "sidebar_archive_ad_code",
    "sidebar_single_ad_code",
    "single_top_ad_code",
    "single_bottom_ad_code",
    "single_middle_ad_code",
)

_H2_TAG = re.compile(r"<h2[^>]*>", re.IGNORECASE)

MIDDLE_AD_TEMPLATE = Template(
    """
<div class="advertisement-middle my-6">
  <div class="text-xs text-gray-500 mb-2 text-center">Advertisement</div>
  {{ ad_code }}
</div>
    """.strip()
)


class AdvertisementService:
    def __init__(self, settings_service: AdminSettingsService) -> None:
        self.settings_service = settings_service

    async def ad_config(self) -> dict[str, str]:
        settings = await self.settings_service.get_settings()
        return {position: getattr(settings, position) or "" for position in AD_POSITIONS}

    async def get_ad_code(self, position: str) -> str:
        if position not in AD_POSITIONS:
            logger.debug("Unknown ad position requested: %s", position)
            return ""
        config = await self.ad_config()
        return config.get(position, "")

    @staticmethod
    def insert_middle_ad(content: str, ad_code: str) -> str:
        """Insert the ad block right before the middle ``<h2>`` of an article body."""
        if not content or not ad_code:
            return content
        matches = list(_H2_TAG.finditer(content))
        if not matches:
            return content
        middle = matches[len(matches) // 2]
        ad_html = MIDDLE_AD_TEMPLATE.render(ad_code=ad_code)
        return content[: middle.start()] + ad_html + content[middle.start():]
