"""Load test for the door: many scanners hitting the same roster at once.

Usage:
    LOCUST_ROSTER=roster.csv locust -H http://localhost:3000

The roster is imported once at start; each user then repeatedly views and
confirms random tokens. Most confirmations after the first pass are expected
to come back 400 (already present), which is counted as success.
"""
import os
import random

from locust import HttpUser, task, between, events

TOKENS = []


ADMIN_CREDENTIALS = {
    "username": os.getenv("ADMIN_USERNAME", "admin"),
    "password": os.getenv("ADMIN_PASSWORD", "adminpass"),
}


def _check_login(response):
    if response.status_code != 200:
        raise RuntimeError(f"Admin login failed: {response.status_code} {response.text}")


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    import requests

    session = requests.Session()
    base_url = environment.host
    _check_login(session.post(f"{base_url}/api/v1/auth/admin/login", json=ADMIN_CREDENTIALS))

    roster_path = os.getenv("LOCUST_ROSTER", "roster.csv")
    with open(roster_path, "rb") as handle:
        response = session.post(f"{base_url}/api/v1/roster/import", files={"file": handle})
    if response.status_code != 200:
        raise RuntimeError(f"Roster import failed: {response.status_code} {response.text}")

    members = session.get(f"{base_url}/api/v1/roster").json()["members"]
    TOKENS.extend(m["token"] for m in members)


class Scanner(HttpUser):
    wait_time = between(0.5, 2)

    def on_start(self):
        _check_login(self.client.post("/api/v1/auth/admin/login", json=ADMIN_CREDENTIALS))

    @task(3)
    def view(self):
        token = random.choice(TOKENS)
        self.client.get(f"/api/v1/scan/{token}", name="/api/v1/scan/[token]")

    @task(1)
    def confirm(self):
        token = random.choice(TOKENS)
        with self.client.post(
            f"/api/v1/scan/{token}/checkin",
            name="/api/v1/scan/[token]/checkin",
            catch_response=True,
        ) as response:
            if response.status_code in (200, 400):
                response.success()
