"""Authentication endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.api.deps import get_admin_session
from app.schemas import AdminLoginRequest, SessionResponse, SuccessResponse
from app.core.logging_config import get_logger
from app.core.rate_limit import limiter, RATE_LIMITS
from app.core.security import (
    ADMIN_COOKIE_NAME,
    AdminSession,
    create_access_token,
    verify_admin_credentials,
)
from app.core import config

logger = get_logger(__name__)
router = APIRouter()


@router.post("/admin/login", response_model=SuccessResponse)
@limiter.limit(RATE_LIMITS["login"])
async def admin_login(request: Request, credentials: AdminLoginRequest, response: Response) -> SuccessResponse:
    """
    Authenticate the administrator and set a JWT in an httpOnly cookie.

    Example:
        Request:
            POST /api/v1/auth/admin/login
            {
                "username": "admin",
                "password": "your-secure-password"
            }

        Response (200):
            {
                "success": true,
                "message": "Logged in successfully"
            }
            Set-Cookie: admin_token=eyJhbGc...; HttpOnly; SameSite=Lax

        Response (401):
            {
                "detail": "Invalid credentials"
            }
    """
    if not verify_admin_credentials(credentials.username, credentials.password):
        logger.warning("admin_login_failed", username=credentials.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    access_token = create_access_token(data={"is_admin": True, "sub": credentials.username})

    response.set_cookie(
        key=ADMIN_COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=config.settings.ENVIRONMENT == "production",
        samesite="lax",
        max_age=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

    logger.info("admin_logged_in", username=credentials.username)
    return SuccessResponse(success=True, message="Logged in successfully")


@router.post("/admin/logout", response_model=SuccessResponse)
async def admin_logout(response: Response) -> SuccessResponse:
    """Clear the admin cookie. Safe to call when not logged in."""
    response.delete_cookie(key=ADMIN_COOKIE_NAME)
    return SuccessResponse(success=True, message="Logged out successfully")


@router.get("/admin/session", response_model=SessionResponse)
async def admin_session(session: AdminSession = Depends(get_admin_session)) -> SessionResponse:
    """Report whether the caller holds a valid admin cookie."""
    return SessionResponse(is_admin=session.is_admin)
