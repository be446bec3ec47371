"""Database models."""
from app.db.models.member import Member
from app.db.models.attendance import Attendance

__all__ = ["Member", "Attendance"]
