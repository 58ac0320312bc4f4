from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nexjob.api import admin_settings, advertisements, auth, pages
from nexjob.bootstrap import run_runtime_migrations
from nexjob.config import settings
from nexjob.database import Base, engine
from nexjob.models import admin_settings as admin_settings_model, user  # noqa: F401


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.site_url, "http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    settings.ensure_directories()
    Base.metadata.create_all(bind=engine)
    run_runtime_migrations(engine)
    logger.info("%s backend started (env=%s)", settings.app_name, settings.environment)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(pages.router, prefix="/api/pages", tags=["pages"])
app.include_router(pages.robots_router, tags=["pages"])
app.include_router(admin_settings.router, prefix="/api/admin/settings", tags=["admin"])
app.include_router(advertisements.router, prefix="/api/ads", tags=["advertisements"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
