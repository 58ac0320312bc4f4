from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text, func

from nexjob.database import Base


class AdminSettings(Base):
    __tablename__ = "admin_settings"
    __table_args__ = (
        Index("idx_admin_settings_created", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)

    api_url = Column(String(1000))
    filters_api_url = Column(String(1000))
    auth_token = Column(Text)
    site_title = Column(String(255))
    site_tagline = Column(String(255))
    site_description = Column(Text)
    site_url = Column(String(1000))
    ga_id = Column(String(64))
    gtm_id = Column(String(64))

    wp_posts_api_url = Column(String(1000))
    wp_jobs_api_url = Column(String(1000))
    wp_auth_token = Column(Text)

    location_page_title_template = Column(Text)
    location_page_description_template = Column(Text)
    category_page_title_template = Column(Text)
    category_page_description_template = Column(Text)
    jobs_title = Column(Text)
    jobs_description = Column(Text)
    articles_title = Column(Text)
    articles_description = Column(Text)
    login_page_title = Column(Text)
    login_page_description = Column(Text)
    signup_page_title = Column(Text)
    signup_page_description = Column(Text)
    profile_page_title = Column(Text)
    profile_page_description = Column(Text)

    home_og_image = Column(String(1000))
    jobs_og_image = Column(String(1000))
    articles_og_image = Column(String(1000))
    default_job_og_image = Column(String(1000))
    default_article_og_image = Column(String(1000))

    sitemap_update_interval = Column(Integer, default=300)
    auto_generate_sitemap = Column(Boolean, default=True)
    last_sitemap_update = Column(DateTime)
    robots_txt = Column(Text)

    popup_ad_code = Column(Text, default="")
    sidebar_archive_ad_code = Column(Text, default="")
    sidebar_single_ad_code = Column(Text, default="")
    single_top_ad_code = Column(Text, default="")
    single_bottom_ad_code = Column(Text, default="")
    single_middle_ad_code = Column(Text, default="")

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())
