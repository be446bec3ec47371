"""Security and authentication utilities."""
import hmac
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import argon2
import jwt
from fastapi import Request

from app.core import config
from app.core.constants import MEMBER_TOKEN_BYTES
from app.core.exceptions import UnauthorizedError

ADMIN_COOKIE_NAME = "admin_token"

# Argon2 hasher for the admin password
ph = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,
    parallelism=1,
    hash_len=32,
    salt_len=16
)


@dataclass(frozen=True)
class AdminSession:
    """Who is calling, as far as the admin gate is concerned.

    Built once per request from the auth cookie and handed to every
    admin-gated service call, so the gate is an explicit argument rather
    than ambient request state.
    """

    is_admin: bool = False
    username: Optional[str] = None


ANONYMOUS = AdminSession()


def generate_member_token() -> str:
    """Generate an unguessable roster token (128 random bits, hex)."""
    return secrets.token_hex(MEMBER_TOKEN_BYTES)


def get_password_hash(password: str) -> str:
    """Hash a password using Argon2."""
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its Argon2 hash."""
    try:
        ph.verify(password_hash, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False


def verify_admin_credentials(username: str, password: str) -> bool:
    """Check a login attempt against ADMIN_USERNAME / ADMIN_PASSWORD.

    ADMIN_PASSWORD may be an Argon2 hash (recommended, see hash_password.py)
    or plaintext for local development.
    """
    if not hmac.compare_digest(username, config.settings.ADMIN_USERNAME):
        return False

    stored_password = config.settings.ADMIN_PASSWORD
    if stored_password.startswith("$argon2"):
        return verify_password(password, stored_password)
    return hmac.compare_digest(password, stored_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.settings.SECRET_KEY, algorithm=config.settings.ALGORITHM)


def decode_admin_token(token: str) -> AdminSession:
    """Decode an admin JWT into a session, raising UnauthorizedError if unusable."""
    try:
        payload = jwt.decode(token, config.settings.SECRET_KEY, algorithms=[config.settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Session expired - Please login again")
    except jwt.PyJWTError:
        raise UnauthorizedError("Invalid session - Please login again")

    if not payload.get("is_admin"):
        raise UnauthorizedError("Unauthorized")
    return AdminSession(is_admin=True, username=payload.get("sub"))


def get_admin_session(request: Request) -> AdminSession:
    """Resolve the caller's session without failing for anonymous callers."""
    token = request.cookies.get(ADMIN_COOKIE_NAME)
    if not token:
        return ANONYMOUS
    try:
        return decode_admin_token(token)
    except UnauthorizedError:
        return ANONYMOUS


def verify_admin_token(request: Request) -> AdminSession:
    """Dependency for admin-only routers: the session or a 401."""
    token = request.cookies.get(ADMIN_COOKIE_NAME)
    if not token:
        raise UnauthorizedError("Unauthorized - Please login first")
    return decode_admin_token(token)


def require_admin(session: AdminSession) -> None:
    """Gate used by the service layer."""
    if not session.is_admin:
        raise UnauthorizedError("Unauthorized - Please login first")
