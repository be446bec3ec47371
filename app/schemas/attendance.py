"""Attendance schemas."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.sanitization import sanitize_display_field, sanitize_member_id


class AttendanceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    member_id: Optional[str] = None
    patient_name: Optional[str] = None
    hospital_name: Optional[str] = None
    major: Optional[str] = None
    status: str
    time: str
    forced: bool


class AttendanceListResponse(BaseModel):
    success: bool = True
    attendance: List[AttendanceOut]


class AttendanceRecordResponse(BaseModel):
    success: bool = True
    message: str
    record: AttendanceOut


class AttendanceFields(BaseModel):
    patient_name: Optional[str] = Field(None, max_length=200)
    hospital_name: Optional[str] = Field(None, max_length=200)
    major: Optional[str] = Field(None, max_length=200)

    @field_validator('patient_name', 'hospital_name', 'major')
    @classmethod
    def sanitize_display(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_display_field(v)


class AttendanceCreate(AttendanceFields):
    member_id: str = Field(..., min_length=1, max_length=64)

    @field_validator('member_id')
    @classmethod
    def sanitize_member_id_field(cls, v: str) -> str:
        return sanitize_member_id(v)


class AttendanceUpdate(AttendanceFields):
    pass
