"""Scan endpoints.

These are addressed by a member's token, which is the only credential the
public views need. Confirming attendance still requires the admin cookie.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_admin_session, get_base_url
from app.core.rate_limit import limiter, RATE_LIMITS
from app.core.security import AdminSession
from app.core.utils import build_scan_url
from app.schemas import (
    AttendanceRecordResponse,
    AttendanceOut,
    CodeResponse,
    MemberOut,
    ScanResponse,
)
from app.services import check_in, qr_data_url, query_status, resolve_by_token

router = APIRouter()


@router.get("/{token}", response_model=ScanResponse)
@limiter.limit(RATE_LIMITS["scan_view"])
async def scan_view_endpoint(
    request: Request,
    token: str,
    session: AdminSession = Depends(get_admin_session),
    db: Session = Depends(get_db),
):
    """
    Show who a scanned code belongs to and whether they are checked in.

    Example:
        Request:
            GET /api/v1/scan/9f86d081884c7d659a2feaa0c55ad015

        Response (200):
            {
                "success": true,
                "member": {"id": "1", "patient_name": "A", ...},
                "status": "Invited",
                "time": "-",
                "is_admin": false
            }

        Response (404):
            {
                "success": false,
                "message": "Member not found",
                "error": {"code": "not_found", "message": "Member not found"}
            }
    """
    member = resolve_by_token(db, token)
    status = query_status(db, member)
    return ScanResponse(
        member=MemberOut.model_validate(member),
        status=status.status,
        time=status.time,
        is_admin=session.is_admin,
    )


@router.get("/{token}/code", response_model=CodeResponse)
@limiter.limit(RATE_LIMITS["ticket_code"])
async def ticket_code_endpoint(
    request: Request,
    token: str,
    base_url: str = Depends(get_base_url),
    db: Session = Depends(get_db),
):
    """The attendee's own ticket: the QR code for their token."""
    member = resolve_by_token(db, token)
    url = build_scan_url(base_url, member.token)
    return CodeResponse(url=url, qr_image=qr_data_url(url))


@router.post("/{token}/checkin", response_model=AttendanceRecordResponse)
async def checkin_endpoint(
    token: str,
    session: AdminSession = Depends(get_admin_session),
    db: Session = Depends(get_db),
):
    """
    Confirm a scanned code and mark the member present (admin only).

    Responses:
        200: marked present
        400: already marked present
        401: not logged in as admin
        404: unknown token
    """
    record = check_in(db, session, token)
    return AttendanceRecordResponse(
        message="Marked present successfully",
        record=AttendanceOut.model_validate(record),
    )
