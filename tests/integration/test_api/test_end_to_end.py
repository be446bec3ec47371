"""End-to-end check-in flow through the API."""
import csv
import io

import pytest


@pytest.mark.integration
def test_import_scan_checkin_export(admin_client):
    upload = admin_client.post(
        "/api/v1/roster/import",
        files={"file": ("roster.csv", b"id,patient_name,hospital_name,major\n1,A,H1,CS\n", "text/csv")},
    )
    assert upload.json() == {"success": True, "count": 1}

    members = admin_client.get("/api/v1/roster").json()["members"]
    assert len(members) == 1
    token = members[0]["token"]

    scan = admin_client.get(f"/api/v1/scan/{token}").json()
    assert (scan["status"], scan["time"]) == ("Invited", "-")

    first = admin_client.post(f"/api/v1/scan/{token}/checkin")
    assert first.status_code == 200
    assert admin_client.get(f"/api/v1/scan/{token}").json()["status"] == "Present"

    second = admin_client.post(f"/api/v1/scan/{token}/checkin")
    assert second.status_code == 400
    assert admin_client.get(f"/api/v1/scan/{token}").json()["status"] == "Present"

    export = admin_client.get("/api/v1/attendance/export")
    assert export.status_code == 200
    assert "attendance.csv" in export.headers["content-disposition"]
    rows = list(csv.reader(io.StringIO(export.text)))
    assert rows[0] == ["ID", "Patient Name", "Hospital Name", "Major", "Status", "Time"]
    assert [row[0] for row in rows[1:]] == ["1"]
    assert rows[1][1:5] == ["A", "H1", "CS", "Present"]
