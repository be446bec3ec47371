"""Main FastAPI application."""
from fastapi import FastAPI, HTTPException, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.orm import Session
from sqlalchemy import text
import os

from app.api.v1.router import api_router
from app.api.deps import get_db
from app.core.config import settings
from app.core.exceptions import RollCallError
from app.core.rate_limit import limiter
from app.core.logging_config import setup_logging, get_logger
from app.middleware import LoggingMiddleware
from app.schemas import ErrorDetail, ErrorResponse

setup_logging(level=settings.LOG_LEVEL)
logger = get_logger(__name__)

if settings.ENVIRONMENT == "production":
    settings.validate_production_config()

logger.info(
    "application_starting",
    app_title=settings.APP_TITLE,
    app_version=settings.APP_VERSION,
    environment=settings.ENVIRONMENT,
)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RollCallError)
async def rollcall_error_handler(request: Request, exc: RollCallError) -> JSONResponse:
    """Answer domain errors with their status and the standard error body."""
    if exc.status_code >= 500:
        logger.error("request_error", code=exc.code, message=exc.message)
    body = ErrorResponse(
        message=exc.message,
        error=ErrorDetail(code=exc.code, message=exc.message),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# Must be added before other middleware for proper request tracking
app.add_middleware(LoggingMiddleware)


@app.middleware("http")
async def add_api_version_header(request: Request, call_next):
    """Add X-API-Version header to all responses for version tracking."""
    response = await call_next(request)
    response.headers["X-API-Version"] = settings.APP_VERSION
    return response

# CORS middleware - configured for cookie-based auth
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

app.include_router(api_router)


# Health endpoint - must be defined before catch-all route
@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns 503 if database is unreachable.
    """
    health_status = {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "database": {"status": "connected"},
    }

    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["database"]["status"] = f"error: {str(e)}"
        logger.error("health_check_failed", error=str(e))
        raise HTTPException(status_code=503, detail=health_status)

    return health_status

# Serve the frontend build (login, dashboard, scan and attendance pages)
if os.path.exists(settings.FRONTEND_BUILD_PATH):
    assets_path = f"{settings.FRONTEND_BUILD_PATH}/assets"
    if os.path.exists(assets_path):
        app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

    @app.get("/", response_class=FileResponse)
    async def serve_root():
        return FileResponse(f"{settings.FRONTEND_BUILD_PATH}/index.html")

    @app.get("/{full_path:path}")
    async def serve_frontend(full_path: str):
        """Serve the frontend for all non-API routes, /scan included."""
        if full_path.startswith("api") or full_path.startswith("docs") or full_path.startswith("redoc") or full_path.startswith("openapi.json"):
            raise HTTPException(status_code=404, detail="Not found")

        file_path = f"{settings.FRONTEND_BUILD_PATH}/{full_path}"
        if os.path.exists(file_path) and os.path.isfile(file_path):
            return FileResponse(file_path)

        return FileResponse(f"{settings.FRONTEND_BUILD_PATH}/index.html")
else:
    # Scan URLs in the QR codes land on the frontend's /scan page
    logger.warning(
        "frontend_build_missing",
        path=settings.FRONTEND_BUILD_PATH,
        hint="scanned codes only resolve if PUBLIC_BASE_URL points at a hosted frontend",
    )
