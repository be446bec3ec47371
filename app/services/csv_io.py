"""Roster CSV import and the CSV exports."""
import csv
import io
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from app.core.constants import (
    ATTENDANCE_EXPORT_HEADER,
    ROSTER_EXPORT_HEADER,
    ROSTER_IMPORT_FIELDS,
)
from app.core.exceptions import InputFailureError
from app.core.utils import build_scan_url
from app.db.models import Attendance, Member


def parse_roster_csv(path: Union[str, Path]) -> List[Dict[str, Optional[str]]]:
    """
    Read an uploaded roster file into row dicts.

    The header must name the ``id`` column; the other expected columns may be
    missing and come through as None. Extra columns are ignored. Values are
    not validated here.

    Raises:
        InputFailureError: file is not UTF-8 text or not parseable as CSV
    """
    try:
        # utf-8-sig handles the BOM Excel writes
        with open(path, newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            if reader.fieldnames is None:
                raise InputFailureError("Error parsing CSV: file is empty")
            header = [name.strip() for name in reader.fieldnames]
            if "id" not in header:
                raise InputFailureError("Error parsing CSV: missing 'id' column")
            reader.fieldnames = header

            return [
                {field: row.get(field) for field in ROSTER_IMPORT_FIELDS}
                for row in reader
            ]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise InputFailureError(f"Error parsing CSV: {exc}") from exc


def _to_csv(header: Iterable[str], rows: Iterable[Iterable[object]]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return output.getvalue()


def render_roster_csv(members: Iterable[Member], base_url: str) -> str:
    """Roster with the URL each member's QR code points at."""
    return _to_csv(
        ROSTER_EXPORT_HEADER,
        (
            [m.id, m.patient_name or "", m.hospital_name or "", m.major or "",
             build_scan_url(base_url, m.token)]
            for m in members
        ),
    )


def render_attendance_csv(records: Iterable[Attendance]) -> str:
    return _to_csv(
        ATTENDANCE_EXPORT_HEADER,
        (
            [r.member_id or "", r.patient_name or "", r.hospital_name or "",
             r.major or "", r.status, r.time]
            for r in records
        ),
    )
