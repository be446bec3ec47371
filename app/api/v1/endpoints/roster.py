"""Roster endpoints (admin only)."""
import os
import shutil
import tempfile
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_base_url, verify_admin_token
from app.core import config
from app.core.exceptions import InputFailureError
from app.core.logging_config import get_logger
from app.core.security import AdminSession, require_admin
from app.core.utils import build_scan_url
from app.schemas import CodeResponse, ImportResponse, MemberListResponse, MemberOut
from app.services import (
    import_roster,
    list_roster,
    parse_roster_csv,
    qr_data_url,
    reissue_token,
    render_roster_csv,
    resolve_by_id,
)

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(verify_admin_token)])


def _save_upload(upload: UploadFile) -> str:
    """Copy the upload to a temporary file under UPLOAD_DIR and return its path."""
    os.makedirs(config.settings.UPLOAD_DIR, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "wb", dir=config.settings.UPLOAD_DIR, suffix=".csv", delete=False
    ) as handle:
        shutil.copyfileobj(upload.file, handle)
        return handle.name


@router.post("/import", response_model=ImportResponse)
async def import_roster_endpoint(
    file: Optional[UploadFile] = File(None),
    session: AdminSession = Depends(verify_admin_token),
    db: Session = Depends(get_db),
):
    """
    Upload a roster CSV (``id,patient_name,hospital_name,major``).

    Rows are upserted by id. The uploaded file is removed whether or not the
    import succeeds.

    Example:
        Request:
            POST /api/v1/roster/import
            Content-Type: multipart/form-data; file=roster.csv

        Response (200):
            {
                "success": true,
                "count": 120
            }
    """
    require_admin(session)
    if file is None or not file.filename:
        raise InputFailureError("No file uploaded")

    path = _save_upload(file)
    try:
        rows = parse_roster_csv(path)
        count = import_roster(db, rows)
    finally:
        os.remove(path)

    return ImportResponse(success=True, count=count)


@router.get("", response_model=MemberListResponse)
async def list_roster_endpoint(db: Session = Depends(get_db)):
    members = list_roster(db)
    return MemberListResponse(members=[MemberOut.model_validate(m) for m in members])


@router.get("/export")
async def export_roster_endpoint(
    base_url: str = Depends(get_base_url),
    db: Session = Depends(get_db),
):
    """Download the roster with each member's QR code URL as CSV."""
    content = render_roster_csv(list_roster(db), base_url)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="qr_codes.csv"'},
    )


@router.get("/{member_id}/code", response_model=CodeResponse)
async def member_code_endpoint(
    member_id: str,
    base_url: str = Depends(get_base_url),
    db: Session = Depends(get_db),
):
    """QR code for a member, looked up by roster id."""
    member = resolve_by_id(db, member_id)
    url = build_scan_url(base_url, member.token)
    return CodeResponse(url=url, qr_image=qr_data_url(url))


@router.post("/{member_id}/token", response_model=MemberOut)
async def reissue_token_endpoint(
    member_id: str,
    session: AdminSession = Depends(verify_admin_token),
    db: Session = Depends(get_db),
):
    """
    Issue a new token for one member.

    The member's previously printed code stops working.
    """
    member = reissue_token(db, session, member_id)
    return MemberOut.model_validate(member)
