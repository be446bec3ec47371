"""Shared API dependencies."""
from fastapi import Request

from app.core import config
from app.db import get_db
from app.core.security import get_admin_session, verify_admin_token


def get_base_url(request: Request) -> str:
    """Origin the QR codes point at: PUBLIC_BASE_URL, else the request's own."""
    if config.settings.PUBLIC_BASE_URL:
        return config.settings.PUBLIC_BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")


__all__ = ["get_db", "get_admin_session", "verify_admin_token", "get_base_url"]
