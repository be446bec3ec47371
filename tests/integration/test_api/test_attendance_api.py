"""Integration tests for attendance endpoints."""
import pytest


@pytest.mark.integration
class TestAttendanceList:

    def test_list_empty(self, admin_client):
        response = admin_client.get("/api/v1/attendance")

        assert response.status_code == 200
        assert response.json() == {"success": True, "attendance": []}

    def test_list_requires_admin(self, client):
        assert client.get("/api/v1/attendance").status_code == 401

    def test_export_requires_admin(self, client):
        assert client.get("/api/v1/attendance/export").status_code == 401


@pytest.mark.integration
class TestForcedAdd:

    def test_add_record(self, admin_client):
        response = admin_client.post(
            "/api/v1/attendance",
            json={"member_id": "42", "patient_name": "Walk In", "hospital_name": "H9", "major": "Bio"},
        )

        assert response.status_code == 200
        record = response.json()["record"]
        assert record["member_id"] == "42"
        assert record["status"] == "Present"
        assert record["forced"] is True

    def test_add_allows_duplicates(self, admin_client, member):
        admin_client.post(f"/api/v1/scan/{member.token}/checkin")

        response = admin_client.post("/api/v1/attendance", json={"member_id": member.id})

        assert response.status_code == 200
        records = admin_client.get("/api/v1/attendance").json()["attendance"]
        assert [r["forced"] for r in records] == [False, True]

    def test_add_sanitizes_fields(self, admin_client):
        response = admin_client.post(
            "/api/v1/attendance",
            json={"member_id": " 7 ", "patient_name": "<b>Bold</b>  Name"},
        )

        record = response.json()["record"]
        assert record["member_id"] == "7"
        assert record["patient_name"] == "Bold Name"

    def test_add_requires_member_id(self, admin_client):
        assert admin_client.post("/api/v1/attendance", json={"patient_name": "x"}).status_code == 422

    def test_add_requires_admin(self, client):
        assert client.post("/api/v1/attendance", json={"member_id": "1"}).status_code == 401


@pytest.mark.integration
class TestUpdateDelete:

    def test_update_record(self, admin_client, member):
        record = admin_client.post(f"/api/v1/scan/{member.token}/checkin").json()["record"]

        response = admin_client.put(
            f"/api/v1/attendance/{record['id']}",
            json={"hospital_name": "Mercy"},
        )

        assert response.status_code == 200
        updated = response.json()["record"]
        assert updated["hospital_name"] == "Mercy"
        assert updated["patient_name"] == "Ada Lovelace"
        assert updated["time"] == record["time"]

    def test_update_unknown(self, admin_client):
        response = admin_client.put("/api/v1/attendance/999", json={"major": "x"})
        assert response.status_code == 404

    def test_delete_reverts_to_invited(self, admin_client, member):
        record = admin_client.post(f"/api/v1/scan/{member.token}/checkin").json()["record"]

        response = admin_client.delete(f"/api/v1/attendance/{record['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Record deleted successfully"}
        scan = admin_client.get(f"/api/v1/scan/{member.token}").json()
        assert scan["status"] == "Invited"
        assert scan["time"] == "-"

        again = admin_client.post(f"/api/v1/scan/{member.token}/checkin")
        assert again.status_code == 200

    def test_delete_unknown(self, admin_client):
        assert admin_client.delete("/api/v1/attendance/999").status_code == 404

    def test_update_and_delete_require_admin(self, client):
        assert client.put("/api/v1/attendance/1", json={"major": "x"}).status_code == 401
        assert client.delete("/api/v1/attendance/1").status_code == 401
