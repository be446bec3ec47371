"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here for Alembic to detect them
from app.db.models.member import Member  # noqa: F401, E402
from app.db.models.attendance import Attendance  # noqa: F401, E402
