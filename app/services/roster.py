"""Roster business logic: import, token issuance and lookups."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from sqlalchemy.orm import Session

from app.core import config
from app.core.constants import STATUS_INVITED, STATUS_PRESENT, TIME_PLACEHOLDER
from app.core.exceptions import NotFoundError
from app.core.logging_config import get_logger
from app.core.sanitization import is_valid_token_format
from app.core.security import AdminSession, generate_member_token, require_admin
from app.db.models import Attendance, Member
from app.services.utils import store_guard

logger = get_logger(__name__)

DISPLAY_FIELDS = ("patient_name", "hospital_name", "major")


@dataclass(frozen=True)
class MemberStatus:
    status: str
    time: str


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


def import_roster(
    db: Session,
    rows: Iterable[Mapping[str, Optional[str]]],
    reissue_tokens: Optional[bool] = None,
) -> int:
    """
    Upsert roster rows keyed by ``id``.

    Ids and display fields are trimmed of surrounding whitespace and otherwise
    stored as given; a row missing a display field is written
    with that field empty. Rows without an id cannot be keyed and are
    skipped. Existing members keep their token unless ``reissue_tokens`` is
    set (it defaults to the REISSUE_TOKENS_ON_IMPORT setting), in which case
    every imported member gets a fresh one and previously printed codes stop
    resolving.

    The batch is committed as one transaction.

    Returns:
        Number of rows written.
    """
    if reissue_tokens is None:
        reissue_tokens = config.settings.REISSUE_TOKENS_ON_IMPORT

    # Later rows win when an id repeats inside one file
    by_id: Dict[str, Mapping[str, Optional[str]]] = {}
    skipped = 0
    for row in rows:
        member_id = _clean(row.get("id"))
        if not member_id:
            skipped += 1
            continue
        by_id[member_id] = row

    if skipped:
        logger.warning("roster_rows_skipped", reason="missing id", count=skipped)

    with store_guard(db, "Error saving to database"):
        existing = {
            m.id: m for m in db.query(Member).filter(Member.id.in_(list(by_id))).all()
        } if by_id else {}

        reissued = 0
        for member_id, row in by_id.items():
            fields = {name: _clean(row.get(name)) for name in DISPLAY_FIELDS}
            member = existing.get(member_id)
            if member is None:
                db.add(Member(id=member_id, token=generate_member_token(), **fields))
                continue

            for name, value in fields.items():
                setattr(member, name, value)
            if reissue_tokens:
                member.token = generate_member_token()
                reissued += 1

        db.commit()

    logger.info(
        "roster_imported",
        rows=len(by_id),
        created=len(by_id) - len(existing),
        updated=len(existing),
        tokens_reissued=reissued,
    )
    return len(by_id)


def list_roster(db: Session) -> List[Member]:
    """All roster members, ordered by id."""
    with store_guard(db, "Error fetching members"):
        return db.query(Member).order_by(Member.id).all()


def resolve_by_token(db: Session, token: str) -> Member:
    """Find the member a scanned token belongs to."""
    if not is_valid_token_format(token):
        raise NotFoundError("Member not found")

    with store_guard(db, "Error fetching member"):
        member = db.query(Member).filter(Member.token == token).first()
    if member is None:
        raise NotFoundError("Member not found")
    return member


def resolve_by_id(db: Session, member_id: str) -> Member:
    with store_guard(db, "Error fetching member"):
        member = db.query(Member).filter(Member.id == member_id).first()
    if member is None:
        raise NotFoundError("Member not found")
    return member


def query_status(db: Session, member: Member) -> MemberStatus:
    """
    Derive a member's attendance status from the attendance table.

    A member with any attendance row is Present (the earliest row supplies
    the time); otherwise Invited with a placeholder time.
    """
    with store_guard(db, "Error fetching attendance"):
        record = (
            db.query(Attendance)
            .filter(Attendance.member_id == member.id)
            .order_by(Attendance.created_at, Attendance.id)
            .first()
        )
    if record is None:
        return MemberStatus(status=STATUS_INVITED, time=TIME_PLACEHOLDER)
    return MemberStatus(status=STATUS_PRESENT, time=record.time)


def reissue_token(db: Session, session: AdminSession, member_id: str) -> Member:
    """Give a member a new token, invalidating the code printed for the old one."""
    require_admin(session)
    member = resolve_by_id(db, member_id)

    with store_guard(db, "Error reissuing token"):
        member.token = generate_member_token()
        db.commit()
        db.refresh(member)

    logger.info("member_token_reissued", member_id=member.id)
    return member
