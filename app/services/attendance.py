"""Attendance business logic: the Invited -> Present transition and admin edits."""
from typing import List, Mapping, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core import config
from app.core.constants import STATUS_PRESENT
from app.core.exceptions import ConflictError, NotFoundError, StoreFailureError
from app.core.logging_config import get_logger
from app.core.security import AdminSession, require_admin
from app.core.utils import format_checkin_time
from app.db.models import Attendance
from app.services.roster import DISPLAY_FIELDS, resolve_by_token
from app.services.utils import store_guard

logger = get_logger(__name__)

ALREADY_PRESENT = "Already marked present"


def _has_attendance(db: Session, member_id: str) -> bool:
    with store_guard(db, "Error marking present"):
        return db.query(Attendance.id).filter(Attendance.member_id == member_id).first() is not None


def check_in(
    db: Session,
    session: AdminSession,
    token: str,
    tz: Optional[ZoneInfo] = None,
) -> Attendance:
    """
    Mark the member holding ``token`` as present.

    Only an admin can confirm a scan. The member's display fields are copied
    onto the attendance row as they are right now.

    The insert is conditional on the member having no checked-in row: the
    partial unique index on attendance.member_id rejects a second one, so two
    concurrent scans of the same code cannot both succeed. The lookup before
    the insert only exists to give a clean error for rows the admin added by
    hand, which the index does not cover.

    Raises:
        UnauthorizedError: session is not an admin session
        NotFoundError: token does not belong to any member
        ConflictError: member already has an attendance row
        StoreFailureError: database failure
    """
    require_admin(session)
    member = resolve_by_token(db, token)
    tz = tz or config.settings.tz

    if _has_attendance(db, member.id):
        logger.info("checkin_conflict", member_id=member.id)
        raise ConflictError(ALREADY_PRESENT)

    record = Attendance(
        member_id=member.id,
        patient_name=member.patient_name,
        hospital_name=member.hospital_name,
        major=member.major,
        status=STATUS_PRESENT,
        time=format_checkin_time(tz),
        forced=False,
    )
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except IntegrityError:
        db.rollback()
        logger.info("checkin_conflict", member_id=member.id, concurrent=True)
        raise ConflictError(ALREADY_PRESENT)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("checkin_failed", member_id=member.id, error=str(exc))
        raise StoreFailureError(f"Error marking present: {exc}") from exc

    logger.info("member_checked_in", member_id=member.id, attendance_id=record.id)
    return record


def add_attendance_forced(
    db: Session,
    session: AdminSession,
    fields: Mapping[str, Optional[str]],
    tz: Optional[ZoneInfo] = None,
) -> Attendance:
    """
    Insert an attendance row by hand, skipping token lookup and the
    one-row-per-member rule.

    Rows are flagged ``forced`` so they can be told apart from scans.
    """
    require_admin(session)
    tz = tz or config.settings.tz

    record = Attendance(
        member_id=fields.get("member_id"),
        patient_name=fields.get("patient_name"),
        hospital_name=fields.get("hospital_name"),
        major=fields.get("major"),
        status=STATUS_PRESENT,
        time=format_checkin_time(tz),
        forced=True,
    )
    with store_guard(db, "Error adding record"):
        db.add(record)
        db.commit()
        db.refresh(record)

    logger.info("attendance_forced", member_id=record.member_id, attendance_id=record.id)
    return record


def _get_record(db: Session, record_id: int) -> Attendance:
    with store_guard(db, "Error fetching record"):
        record = db.query(Attendance).filter(Attendance.id == record_id).first()
    if record is None:
        raise NotFoundError("Record not found")
    return record


def update_attendance(
    db: Session,
    session: AdminSession,
    record_id: int,
    fields: Mapping[str, Optional[str]],
) -> Attendance:
    """Edit the copied display fields of one row. Status and time are left alone."""
    require_admin(session)
    record = _get_record(db, record_id)

    with store_guard(db, "Error updating record"):
        for name in DISPLAY_FIELDS:
            if name in fields:
                setattr(record, name, fields[name])
        db.commit()
        db.refresh(record)

    logger.info("attendance_updated", attendance_id=record_id, fields=sorted(set(fields) & set(DISPLAY_FIELDS)))
    return record


def delete_attendance(db: Session, session: AdminSession, record_id: int) -> None:
    """Remove one row; a member left without rows is Invited again."""
    require_admin(session)
    record = _get_record(db, record_id)
    member_id = record.member_id

    with store_guard(db, "Error deleting record"):
        db.delete(record)
        db.commit()

    logger.info("attendance_deleted", attendance_id=record_id, member_id=member_id)


def list_attendance(db: Session) -> List[Attendance]:
    """All attendance rows in check-in order."""
    with store_guard(db, "Error fetching attendance"):
        return db.query(Attendance).order_by(Attendance.created_at, Attendance.id).all()
