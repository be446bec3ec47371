"""Attendance endpoints (admin only)."""
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.deps import get_db, verify_admin_token
from app.core.security import AdminSession
from app.schemas import (
    AttendanceCreate,
    AttendanceListResponse,
    AttendanceOut,
    AttendanceRecordResponse,
    AttendanceUpdate,
    SuccessResponse,
)
from app.services import (
    add_attendance_forced,
    delete_attendance,
    list_attendance,
    render_attendance_csv,
    update_attendance,
)

router = APIRouter(dependencies=[Depends(verify_admin_token)])


@router.get("", response_model=AttendanceListResponse)
async def list_attendance_endpoint(db: Session = Depends(get_db)):
    records = list_attendance(db)
    return AttendanceListResponse(attendance=[AttendanceOut.model_validate(r) for r in records])


@router.get("/export")
async def export_attendance_endpoint(db: Session = Depends(get_db)):
    """Download the attendance list as CSV."""
    return Response(
        content=render_attendance_csv(list_attendance(db)),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="attendance.csv"'},
    )


@router.post("", response_model=AttendanceRecordResponse)
async def add_attendance_endpoint(
    payload: AttendanceCreate,
    session: AdminSession = Depends(verify_admin_token),
    db: Session = Depends(get_db),
):
    """
    Add an attendance row by hand.

    Bypasses the scan flow entirely: the member id is not checked against the
    roster and a member may end up with more than one row. Rows added here
    are returned with ``forced: true``.
    """
    record = add_attendance_forced(db, session, payload.model_dump())
    return AttendanceRecordResponse(
        message="Record added successfully",
        record=AttendanceOut.model_validate(record),
    )


@router.put("/{record_id}", response_model=AttendanceRecordResponse)
async def update_attendance_endpoint(
    record_id: int,
    payload: AttendanceUpdate,
    session: AdminSession = Depends(verify_admin_token),
    db: Session = Depends(get_db),
):
    record = update_attendance(db, session, record_id, payload.model_dump(exclude_unset=True))
    return AttendanceRecordResponse(
        message="Record updated successfully",
        record=AttendanceOut.model_validate(record),
    )


@router.delete("/{record_id}", response_model=SuccessResponse)
async def delete_attendance_endpoint(
    record_id: int,
    session: AdminSession = Depends(verify_admin_token),
    db: Session = Depends(get_db),
):
    """Delete a row. The member goes back to Invited if it was their only one."""
    delete_attendance(db, session, record_id)
    return SuccessResponse(success=True, message="Record deleted successfully")
