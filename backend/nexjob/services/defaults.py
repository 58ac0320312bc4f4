from __future__ import annotations

from datetime import datetime

from jinja2 import Template

from nexjob.config import Settings, settings as app_settings
from nexjob.schemas.settings import SiteSettings

DEFAULT_LOCATION_TITLE_TEMPLATE = "Lowongan Kerja di {{lokasi}} - {{site_title}}"
DEFAULT_LOCATION_DESCRIPTION_TEMPLATE = (
    "Temukan lowongan kerja terbaru di {{lokasi}}. "
    "Dapatkan pekerjaan impian Anda dengan gaji terbaik di {{site_title}}."
)
DEFAULT_CATEGORY_TITLE_TEMPLATE = "Lowongan Kerja {{kategori}} - {{site_title}}"
DEFAULT_CATEGORY_DESCRIPTION_TEMPLATE = (
    "Temukan lowongan kerja {{kategori}} terbaru. "
    "Dapatkan pekerjaan impian Anda dengan gaji terbaik di {{site_title}}."
)

ROBOTS_TXT_TEMPLATE = Template(
    """
User-agent: *
Allow: /

# Disallow admin panel
Disallow: /admin/
Disallow: /admin

# Disallow bookmarks (private pages)
Disallow: /bookmarks/
Disallow: /bookmarks

# Allow specific important pages
Allow: /lowongan-kerja/
Allow: /artikel/

# Sitemaps
Sitemap: {{ site_url }}/sitemap.xml
    """.strip()
)


def render_robots_txt(site_url: str) -> str:
    return ROBOTS_TXT_TEMPLATE.render(site_url=site_url.rstrip("/"))


def default_site_settings(config: Settings | None = None) -> SiteSettings:
    config = config or app_settings
    site_url = config.site_url
    return SiteSettings(
        api_url=config.wp_api_url,
        filters_api_url=config.wp_filters_api_url,
        auth_token=config.wp_auth_token,
        site_title=config.site_name,
        site_tagline="Find Your Dream Job",
        site_description=config.site_description,
        site_url=site_url,
        ga_id=config.ga_id,
        gtm_id=config.gtm_id,
        wp_posts_api_url="https://cms.nexjob.tech/wp-json/wp/v2/posts",
        wp_jobs_api_url="https://cms.nexjob.tech/wp-json/wp/v2/lowongan-kerja",
        wp_auth_token=config.wp_auth_token,
        location_page_title_template=DEFAULT_LOCATION_TITLE_TEMPLATE,
        location_page_description_template=DEFAULT_LOCATION_DESCRIPTION_TEMPLATE,
        category_page_title_template=DEFAULT_CATEGORY_TITLE_TEMPLATE,
        category_page_description_template=DEFAULT_CATEGORY_DESCRIPTION_TEMPLATE,
        jobs_title="Lowongan Kerja Terbaru - {{site_title}}",
        jobs_description=(
            "Temukan lowongan kerja terbaru dari berbagai perusahaan terpercaya. "
            "Dapatkan pekerjaan impian Anda dengan gaji terbaik."
        ),
        articles_title="Tips Karir & Panduan Kerja - {{site_title}}",
        articles_description=(
            "Artikel dan panduan karir terbaru untuk membantu perjalanan karir Anda. "
            "Tips interview, CV, dan pengembangan karir."
        ),
        login_page_title="Login - {{site_title}}",
        login_page_description=(
            "Masuk ke akun Nexjob Anda untuk mengakses fitur lengkap pencarian kerja "
            "dan menyimpan lowongan favorit."
        ),
        signup_page_title="Daftar Akun - {{site_title}}",
        signup_page_description=(
            "Daftar akun gratis di Nexjob untuk menyimpan lowongan favorit "
            "dan mendapatkan notifikasi pekerjaan terbaru."
        ),
        profile_page_title="Profil Saya - {{site_title}}",
        profile_page_description="Kelola profil dan preferensi akun Nexjob Anda.",
        home_og_image=f"{site_url}/og-home.jpg",
        jobs_og_image=f"{site_url}/og-jobs.jpg",
        articles_og_image=f"{site_url}/og-articles.jpg",
        default_job_og_image=f"{site_url}/og-job-default.jpg",
        default_article_og_image=f"{site_url}/og-article-default.jpg",
        sitemap_update_interval=300,
        auto_generate_sitemap=True,
        last_sitemap_update=datetime.utcnow(),
        robots_txt=render_robots_txt(site_url),
        popup_ad_code="",
        sidebar_archive_ad_code="",
        sidebar_single_ad_code="",
        single_top_ad_code="",
        single_bottom_ad_code="",
        single_middle_ad_code="",
    )
