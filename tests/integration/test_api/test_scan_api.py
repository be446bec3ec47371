"""Integration tests for the scan endpoints."""
import re

import pytest

from app.core.security import generate_member_token


@pytest.mark.integration
class TestScanView:

    def test_scan_view_public(self, client, member):
        response = client.get(f"/api/v1/scan/{member.token}")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["member"]["id"] == "1"
        assert data["member"]["patient_name"] == "Ada Lovelace"
        assert data["status"] == "Invited"
        assert data["time"] == "-"
        assert data["is_admin"] is False

    def test_scan_view_reports_admin(self, admin_client, member):
        assert admin_client.get(f"/api/v1/scan/{member.token}").json()["is_admin"] is True

    def test_scan_view_unknown_token(self, client, member):
        response = client.get(f"/api/v1/scan/{generate_member_token()}")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Member not found",
            "error": {"code": "not_found", "message": "Member not found"},
        }

    def test_ticket_code(self, client, member):
        response = client.get(f"/api/v1/scan/{member.token}/code")

        assert response.status_code == 200
        data = response.json()
        assert data["url"] == f"http://testserver/scan?token={member.token}"
        assert data["qr_image"].startswith("data:image/svg+xml;base64,")

    def test_ticket_code_unknown_token(self, client):
        assert client.get("/api/v1/scan/nope/code").status_code == 404


@pytest.mark.integration
class TestCheckinEndpoint:

    def test_checkin_success(self, admin_client, member):
        response = admin_client.post(f"/api/v1/scan/{member.token}/checkin")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Marked present successfully"
        assert data["record"]["member_id"] == "1"
        assert data["record"]["forced"] is False
        assert re.fullmatch(r"\d{2}/\d{2}/\d{4}, \d{2}:\d{2}:\d{2} (AM|PM)", data["record"]["time"])

        scan = admin_client.get(f"/api/v1/scan/{member.token}").json()
        assert scan["status"] == "Present"
        assert scan["time"] == data["record"]["time"]

    def test_checkin_twice(self, admin_client, member):
        admin_client.post(f"/api/v1/scan/{member.token}/checkin")

        response = admin_client.post(f"/api/v1/scan/{member.token}/checkin")

        assert response.status_code == 400
        assert response.json()["message"] == "Already marked present"
        assert response.json()["error"]["code"] == "conflict"

    def test_checkin_requires_admin(self, client, member):
        response = client.post(f"/api/v1/scan/{member.token}/checkin")

        assert response.status_code == 401
        assert client.get(f"/api/v1/scan/{member.token}").json()["status"] == "Invited"

    def test_checkin_unknown_token(self, admin_client):
        response = admin_client.post(f"/api/v1/scan/{generate_member_token()}/checkin")
        assert response.status_code == 404


@pytest.mark.integration
@pytest.mark.rate_limit
class TestScanRateLimit:

    def test_scan_view_is_rate_limited(self, client, member):
        statuses = [client.get(f"/api/v1/scan/{member.token}").status_code for _ in range(61)]

        assert statuses[:60] == [200] * 60
        assert statuses[60] == 429
