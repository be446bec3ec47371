from .attendance import (
    add_attendance_forced,
    check_in,
    delete_attendance,
    list_attendance,
    update_attendance,
)
from .csv_io import parse_roster_csv, render_attendance_csv, render_roster_csv
from .qr import generate_qr_code, qr_data_url
from .roster import (
    MemberStatus,
    import_roster,
    list_roster,
    query_status,
    reissue_token,
    resolve_by_id,
    resolve_by_token,
)

__all__ = [
    # attendance
    "add_attendance_forced",
    "check_in",
    "delete_attendance",
    "list_attendance",
    "update_attendance",
    # roster
    "MemberStatus",
    "import_roster",
    "list_roster",
    "query_status",
    "reissue_token",
    "resolve_by_id",
    "resolve_by_token",
    # csv
    "parse_roster_csv",
    "render_attendance_csv",
    "render_roster_csv",
    # qr
    "generate_qr_code",
    "qr_data_url",
]
