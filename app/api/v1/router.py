"""Main API router for v1."""
from fastapi import APIRouter

from app.api.v1.endpoints import auth, roster, scan, attendance

api_router = APIRouter(prefix="/api/v1")

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(roster.router, prefix="/roster", tags=["Roster"])
api_router.include_router(scan.router, prefix="/scan", tags=["Scan"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])
