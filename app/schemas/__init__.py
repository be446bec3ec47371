"""Pydantic schemas for request/response validation."""
from app.schemas.auth import AdminLoginRequest, SessionResponse
from app.schemas.member import (
    MemberOut,
    MemberListResponse,
    ImportResponse,
    ScanResponse,
    CodeResponse,
)
from app.schemas.attendance import (
    AttendanceOut,
    AttendanceListResponse,
    AttendanceRecordResponse,
    AttendanceCreate,
    AttendanceUpdate,
)
from app.schemas.common import SuccessResponse, ErrorResponse, ErrorDetail

__all__ = [
    "AdminLoginRequest",
    "SessionResponse",
    "MemberOut",
    "MemberListResponse",
    "ImportResponse",
    "ScanResponse",
    "CodeResponse",
    "AttendanceOut",
    "AttendanceListResponse",
    "AttendanceRecordResponse",
    "AttendanceCreate",
    "AttendanceUpdate",
    "SuccessResponse",
    "ErrorResponse",
    "ErrorDetail",
]
