from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from nexjob.database import Base


ROLE_USER = "user"
ROLE_SUPER_ADMIN = "super_admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(120), unique=True, nullable=False, index=True)
    password_hash = Column(String(512), nullable=False)
    role = Column(String(32), default=ROLE_USER, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
