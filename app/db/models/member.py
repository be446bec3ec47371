"""Roster member model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, String, Text, DateTime

from app.db.base import Base


class Member(Base):
    __tablename__ = "members"

    # Roster values are stored unbounded so an oversized cell cannot fail an import
    id = Column(Text, primary_key=True)
    patient_name = Column(Text, nullable=True)
    hospital_name = Column(Text, nullable=True)
    major = Column(Text, nullable=True)
    token = Column(String(64), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(tz.utc),
        onupdate=lambda: datetime.now(tz.utc),
    )
