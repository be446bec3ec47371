"""Roster member schemas."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class MemberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    patient_name: Optional[str] = None
    hospital_name: Optional[str] = None
    major: Optional[str] = None
    token: str


class MemberListResponse(BaseModel):
    success: bool = True
    members: List[MemberOut]


class ImportResponse(BaseModel):
    success: bool = True
    count: int


class ScanResponse(BaseModel):
    """What the scan page shows for a token."""
    success: bool = True
    member: MemberOut
    status: str
    time: str
    is_admin: bool


class CodeResponse(BaseModel):
    success: bool = True
    url: str
    qr_image: str  # data: URL
