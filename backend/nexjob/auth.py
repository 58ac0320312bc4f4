from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os
import secrets
import time

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from nexjob.database import get_db
from nexjob.models.user import User


bearer_scheme = HTTPBearer(auto_error=False)
PBKDF2_ITERATIONS = 210_000
TOKEN_TTL_SECONDS = int(os.getenv("AUTH_TOKEN_TTL_SECONDS", str(60 * 60 * 24 * 14)))
AUTH_SECRET = os.getenv("AUTH_SECRET", "nexjob-dev-secret")


def _pbkdf2(password: str, salt: str, iterations: int) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations).hex()


def _sign(payload: str) -> str:
    return hmac.new(AUTH_SECRET.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${_pbkdf2(password, salt, PBKDF2_ITERATIONS)}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        _, iterations, salt, digest = password_hash.split("$", 3)
        expected = _pbkdf2(password, salt, int(iterations))
    except ValueError:
        return False
    return hmac.compare_digest(expected, digest)


def create_access_token(user_id: int, ttl_seconds: int = TOKEN_TTL_SECONDS) -> str:
    payload = f"{user_id}:{int(time.time()) + ttl_seconds}:{secrets.token_hex(6)}"
    raw = f"{payload}:{_sign(payload)}".encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("utf-8").rstrip("=")


def decode_access_token(token: str) -> int | None:
    """Return the user id carried by a valid, unexpired token, else None."""
    if not token:
        return None
    padded = token + "=" * (-len(token) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded.encode("utf-8")).decode("utf-8")
        user_id, expires_at, nonce, signature = decoded.split(":", 3)
        if not hmac.compare_digest(_sign(f"{user_id}:{expires_at}:{nonce}"), signature):
            return None
        if int(expires_at) < int(time.time()):
            return None
        return int(user_id)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> int:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    user = db.query(User).filter(User.id == user_id, User.is_active == True).first()  # noqa: E712
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid user")
    return user
