from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Protocol

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from nexjob.errors import NetworkError, SettingsError, SettingsPermissionError, SettingsTimeout, TransientStorageError
from nexjob.models.admin_settings import AdminSettings
from nexjob.schemas.settings import SiteSettings

logger = logging.getLogger(__name__)

_PERMISSION_MARKERS = ("permission denied", "insufficient privilege", "access denied", "not authorized", "readonly")
_TIMEOUT_MARKERS = ("timeout", "timed out", "statement_timeout", "canceling statement")
_NETWORK_MARKERS = ("could not connect", "connection refused", "server closed the connection", "network", "unable to open database")


class SettingsStore(Protocol):
    async def fetch_latest(self) -> SiteSettings | None: ...

    async def fetch_latest_id(self) -> int | None: ...

    async def update(self, settings_id: int, values: dict[str, Any]) -> SiteSettings: ...

    async def insert(self, values: dict[str, Any]) -> SiteSettings: ...


def classify_storage_error(exc: SQLAlchemyError) -> SettingsError:
    message = str(getattr(exc, "orig", None) or exc)
    lowered = message.lower()
    if any(marker in lowered for marker in _PERMISSION_MARKERS):
        return SettingsPermissionError(message)
    if any(marker in lowered for marker in _TIMEOUT_MARKERS):
        return SettingsTimeout(message)
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return NetworkError(message)
    if any(marker in lowered for marker in _NETWORK_MARKERS):
        return NetworkError(message)
    return TransientStorageError(message)


class SqlSettingsStore:
    """Reads and writes the ``admin_settings`` row through one database credential."""

    def __init__(self, session_factory: sessionmaker, name: str = "primary") -> None:
        self.session_factory = session_factory
        self.name = name

    async def fetch_latest(self) -> SiteSettings | None:
        return await asyncio.to_thread(self._run, self._fetch_latest)

    async def fetch_latest_id(self) -> int | None:
        return await asyncio.to_thread(self._run, self._fetch_latest_id)

    async def update(self, settings_id: int, values: dict[str, Any]) -> SiteSettings:
        return await asyncio.to_thread(self._run, self._update, settings_id, values)

    async def insert(self, values: dict[str, Any]) -> SiteSettings:
        return await asyncio.to_thread(self._run, self._insert, values)

    def _run(self, operation, *args):
        db: Session = self.session_factory()
        try:
            return operation(db, *args)
        except SQLAlchemyError as exc:
            db.rollback()
            raise classify_storage_error(exc) from exc
        finally:
            db.close()

    @staticmethod
    def _latest_query(db: Session):
        return db.query(AdminSettings).order_by(AdminSettings.created_at.desc(), AdminSettings.id.desc())

    def _fetch_latest(self, db: Session) -> SiteSettings | None:
        row = self._latest_query(db).first()
        if row is None:
            return None
        return SiteSettings.model_validate(row)

    def _fetch_latest_id(self, db: Session) -> int | None:
        row = self._latest_query(db).with_entities(AdminSettings.id).first()
        return int(row[0]) if row else None

    def _update(self, db: Session, settings_id: int, values: dict[str, Any]) -> SiteSettings:
        row = db.query(AdminSettings).filter(AdminSettings.id == settings_id).first()
        if row is None:
            raise TransientStorageError(f"Settings row {settings_id} no longer exists")
        for key, value in values.items():
            setattr(row, key, value)
        row.updated_at = datetime.utcnow()
        db.add(row)
        db.commit()
        db.refresh(row)
        return SiteSettings.model_validate(row)

    def _insert(self, db: Session, values: dict[str, Any]) -> SiteSettings:
        now = datetime.utcnow()
        row = AdminSettings(**values)
        row.created_at = now
        row.updated_at = now
        db.add(row)
        db.commit()
        db.refresh(row)
        logger.info("Inserted new admin settings row id=%s via %s store", row.id, self.name)
        return SiteSettings.model_validate(row)
