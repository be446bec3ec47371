"""Attendance record model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, Index, false

from app.core.constants import STATUS_PRESENT
from app.db.base import Base


class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Not a foreign key: forced rows may name members that are not on the roster
    member_id = Column(Text, nullable=True, index=True)
    patient_name = Column(Text, nullable=True)
    hospital_name = Column(Text, nullable=True)
    major = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=STATUS_PRESENT)
    time = Column(String(40), nullable=False)  # Display string, see CHECKIN_TIME_FORMAT
    forced = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))


# One checked-in row per member. Forced rows added by the admin are exempt,
# which is what lets the check-in itself be a single conditional insert.
Index(
    "uq_attendance_member_checkin",
    Attendance.member_id,
    unique=True,
    sqlite_where=Attendance.forced == false(),
    postgresql_where=Attendance.forced == false(),
)
