#!/usr/bin/env python3
"""
Live smoke test for the clinic front-desk API.

Walks every endpoint of a running server once and reports failures:

    python manage.py runserver
    python smoke_api.py [BASE_URL]

Records created along the way are deleted again at the end, so the
server is left with its seed data.
"""
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

BASE_URL = "http://127.0.0.1:8000"


@dataclass
class CheckResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""


class SmokeTester:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.results: list[CheckResult] = []
        self.errors: list[CheckResult] = []

    def check(self, method: str, endpoint: str, data: Optional[Dict] = None,
              expected_status: int = 200, description: str = "") -> Any:
        """Call one endpoint, record the outcome, and return the decoded body (or None)."""
        start_time = time.time()
        try:
            response = self.session.request(method, f"{self.base_url}{endpoint}", json=data, timeout=10)
        except requests.RequestException as e:
            result = CheckResult(False, endpoint, method, 0, time.time() - start_time, str(e), description)
            print(f"❌ {method} {endpoint} - {e}")
            self.results.append(result)
            self.errors.append(result)
            return None

        response_time = time.time() - start_time
        ok = response.status_code == expected_status
        result = CheckResult(
            success=ok,
            endpoint=endpoint,
            method=method,
            status_code=response.status_code,
            response_time=response_time,
            error_message="" if ok else response.text[:200],
            description=description,
        )
        self.results.append(result)
        if ok:
            print(f"✅ {method} {endpoint} - {description} ({response_time:.2f}s)")
        else:
            print(f"❌ {method} {endpoint} - expected {expected_status}, got {response.status_code}")
            self.errors.append(result)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def run(self) -> bool:
        self.check("GET", "/healthz", description="health")

        # Patient queue
        ann = self.check("POST", "/api/patients", {"name": "Ann"}, 201, "register patient") or {}
        self.check("POST", "/api/patients", {}, 400, "register patient without name")
        if ann.get("id"):
            self.check("PUT", f"/api/patients/{ann['id']}", {"priority": "Urgent"}, description="mark urgent")
            queue = self.check("GET", "/api/queue", description="queue") or []
            first_normal = next((i for i, p in enumerate(queue) if p.get("priority") != "Urgent"), len(queue))
            position = next((i for i, p in enumerate(queue) if p.get("id") == ann["id"]), None)
            if position is None or position > first_normal:
                print("❌ urgent patient is not ahead of the normal ones")
                self.errors.append(CheckResult(False, "/api/queue", "GET", 200, 0, "queue order", "queue order"))

        # Doctors
        self.check("GET", "/api/doctors", description="list doctors")
        self.check("GET", "/api/doctors/d1", description="get doctor")
        doc = self.check("POST", "/api/doctors", {
            "name": "Dr. Smoke", "specialization": "Testing", "gender": "Female", "location": "Clinic Z",
        }, 201, "create doctor") or {}
        self.check("POST", "/api/doctors", {"name": "Dr. Half"}, 400, "create doctor with missing fields")
        if doc.get("id"):
            self.check("PUT", f"/api/doctors/{doc['id']}", {"status": "Busy"}, description="merge update")

        # Appointments
        appt = self.check("POST", "/api/appointments", {
            "patientName": "Ann", "doctorId": doc.get("id", "d1"), "time": "10:00", "date": "2024-05-01",
        }, 201, "book appointment") or {}
        self.check("GET", "/api/appointments", description="list appointments")
        if appt.get("id"):
            self.check("PUT", f"/api/appointments/{appt['id']}", {"status": "Completed"}, description="set status")
            self.check("DELETE", f"/api/appointments/{appt['id']}", expected_status=204, description="cancel")

        # Clean up
        if doc.get("id"):
            self.check("DELETE", f"/api/doctors/{doc['id']}", expected_status=204, description="delete doctor")
            self.check("GET", f"/api/doctors/{doc['id']}", expected_status=404, description="deleted doctor is gone")
        if ann.get("id"):
            self.check("DELETE", f"/api/patients/{ann['id']}", expected_status=204, description="delete patient")

        print(f"\n{len(self.results)} checks, {len(self.errors)} failed")
        return not self.errors


def main():
    tester = SmokeTester(sys.argv[1] if len(sys.argv) > 1 else BASE_URL)
    sys.exit(0 if tester.run() else 1)


if __name__ == "__main__":
    main()
