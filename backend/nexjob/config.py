from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote


@dataclass
class Settings:
    app_name: str = "Nexjob"
    environment: str = os.getenv("ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./db/nexjob.db")
    public_database_url: str = os.getenv("PUBLIC_DATABASE_URL", "")
    wp_api_url: str = os.getenv("WP_API_URL", "https://cms.nexjob.tech/wp-json/wp/v2")
    wp_filters_api_url: str = os.getenv("WP_FILTERS_API_URL", "https://cms.nexjob.tech/wp-json/nex/v1/filters-data")
    wp_auth_token: str = os.getenv("WP_AUTH_TOKEN", "")
    site_name: str = os.getenv("SITE_NAME", "Nexjob")
    site_description: str = os.getenv("SITE_DESCRIPTION", "Platform pencarian kerja terpercaya di Indonesia")
    site_url: str = os.getenv("SITE_URL", "https://nexjob.tech").rstrip("/")
    ga_id: str = os.getenv("GA_ID", "")
    gtm_id: str = os.getenv("GTM_ID", "")
    settings_cache_ttl_seconds: float = float(os.getenv("SETTINGS_CACHE_TTL_SECONDS", "120"))
    settings_fetch_timeout_seconds: float = float(os.getenv("SETTINGS_FETCH_TIMEOUT_SECONDS", "15"))
    admin_check_timeout_seconds: float = float(os.getenv("ADMIN_CHECK_TIMEOUT_SECONDS", "10"))
    settings_save_timeout_seconds: float = float(os.getenv("SETTINGS_SAVE_TIMEOUT_SECONDS", "15"))
    filters_timeout_seconds: float = float(os.getenv("FILTERS_TIMEOUT_SECONDS", "10"))
    default_owner_username: str = os.getenv("DEFAULT_OWNER_USERNAME", "owner")
    default_owner_password: str = os.getenv("DEFAULT_OWNER_PASSWORD", "owner1234")

    @property
    def resolved_public_database_url(self) -> str:
        return self.public_database_url or self.database_url

    def ensure_directories(self) -> None:
        for url in {self.database_url, self.resolved_public_database_url}:
            self._ensure_sqlite_directory(url)

    @staticmethod
    def _ensure_sqlite_directory(database_url: str) -> None:
        if not database_url.startswith("sqlite:///"):
            return
        raw_path = database_url.replace("sqlite:///", "", 1)
        if not raw_path or raw_path == ":memory:":
            return
        db_path = Path(unquote(raw_path))
        if not db_path.is_absolute():
            db_path = Path(".") / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
