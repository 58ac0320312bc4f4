from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from nexjob.models.user import ROLE_SUPER_ADMIN, User

logger = logging.getLogger(__name__)


class Authorizer(Protocol):
    async def is_super_admin(self, user_id: int | None) -> bool: ...


class SuperAdminAuthorizer:
    """Answers whether a user holds the super-admin role."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    async def is_super_admin(self, user_id: int | None) -> bool:
        if user_id is None:
            return False
        try:
            role = await self._load_role(user_id)
        except OperationalError as exc:
            logger.error("Error checking super admin status for user %s: %s", user_id, exc)
            return False
        return role == ROLE_SUPER_ADMIN

    @retry(
        retry=retry_if_exception_type(OperationalError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=8),
        reraise=True,
    )
    async def _load_role(self, user_id: int) -> str | None:
        return await asyncio.to_thread(self._query_role, user_id)

    def _query_role(self, user_id: int) -> str | None:
        db: Session = self.session_factory()
        try:
            user = db.query(User).filter(User.id == user_id, User.is_active == True).first()  # noqa: E712
            return user.role if user else None
        finally:
            db.close()
