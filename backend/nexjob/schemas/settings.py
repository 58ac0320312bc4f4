from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SiteSettingsFields(BaseModel):
    api_url: str | None = None
    filters_api_url: str | None = None
    auth_token: str | None = None
    site_title: str | None = None
    site_tagline: str | None = None
    site_description: str | None = None
    site_url: str | None = None
    ga_id: str | None = None
    gtm_id: str | None = None

    wp_posts_api_url: str | None = None
    wp_jobs_api_url: str | None = None
    wp_auth_token: str | None = None

    location_page_title_template: str | None = None
    location_page_description_template: str | None = None
    category_page_title_template: str | None = None
    category_page_description_template: str | None = None
    jobs_title: str | None = None
    jobs_description: str | None = None
    articles_title: str | None = None
    articles_description: str | None = None
    login_page_title: str | None = None
    login_page_description: str | None = None
    signup_page_title: str | None = None
    signup_page_description: str | None = None
    profile_page_title: str | None = None
    profile_page_description: str | None = None

    home_og_image: str | None = None
    jobs_og_image: str | None = None
    articles_og_image: str | None = None
    default_job_og_image: str | None = None
    default_article_og_image: str | None = None

    sitemap_update_interval: int | None = None
    auto_generate_sitemap: bool | None = None
    last_sitemap_update: datetime | None = None
    robots_txt: str | None = None

    popup_ad_code: str | None = None
    sidebar_archive_ad_code: str | None = None
    sidebar_single_ad_code: str | None = None
    single_top_ad_code: str | None = None
    single_bottom_ad_code: str | None = None
    single_middle_ad_code: str | None = None


class SiteSettings(SiteSettingsFields):
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class SiteSettingsUpdate(SiteSettingsFields):
    """Partial settings payload; only the fields the caller sets are written."""


class SaveSettingsResponse(BaseModel):
    success: bool
    error: str | None = None
