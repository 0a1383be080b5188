"""
Integration tests for the clinic front-desk API.

These tests exercise the request/response contract of every endpoint:
status codes, default field values, the urgent-first queue order and the
different update rules of patients, doctors and appointments.  They use
Django REST Framework's APIClient within the APISimpleTestCase base
class; no database is involved.

To run the tests:

```
pytest -q frontdesk/tests
```
"""

from rest_framework.test import APISimpleTestCase
from rest_framework import status

from ..services.tables import appointments, doctors, patients


class PatientQueueTests(APISimpleTestCase):
    def test_queue_lists_urgent_patients_first(self):
        """The seeded urgent patient (Bob Johnson) comes before the normal ones."""
        response = self.client.get("/api/queue")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [p["name"] for p in response.data]
        self.assertEqual(names, ["Bob Johnson", "John Doe", "Jane Smith"])

    def test_register_patient_defaults(self):
        """New patients are waiting with normal priority and get a fresh id."""
        existing = {p["id"] for p in patients.all()}
        response = self.client.post("/api/patients", {"name": "Ann"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["name"], "Ann")
        self.assertEqual(response.data["status"], "Waiting")
        self.assertEqual(response.data["priority"], "Normal")
        self.assertNotIn(response.data["id"], existing)
        self.assertEqual(len(patients), 4)

    def test_register_patient_requires_name(self):
        for body in ({}, {"name": ""}, {"name": None}):
            response = self.client.post("/api/patients", body, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "Patient name is required.")
            self.assertEqual(response.data["fields"], ["name"])
        self.assertEqual(len(patients), 3)

    def test_urgent_patient_jumps_the_queue(self):
        """Register Ann, mark her urgent, and she is listed before every normal patient."""
        created = self.client.post("/api/patients", {"name": "Ann"}, format="json")
        pid = created.data["id"]

        response = self.client.put(f"/api/patients/{pid}", {"priority": "Urgent"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["priority"], "Urgent")
        self.assertEqual(response.data["status"], "Waiting")

        queue = self.client.get("/api/queue").data
        positions = {p["name"]: i for i, p in enumerate(queue)}
        for normal in ("John Doe", "Jane Smith"):
            self.assertLess(positions["Ann"], positions[normal])
        # Bob was urgent before Ann and stays ahead of her.
        self.assertLess(positions["Bob Johnson"], positions["Ann"])

    def test_update_patient_ignores_empty_values(self):
        response = self.client.put("/api/patients/1", {"status": "", "priority": False}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "Waiting")
        self.assertEqual(response.data["priority"], "Normal")

        response = self.client.put("/api/patients/1", {"status": "With Doctor"}, format="json")
        self.assertEqual(response.data["status"], "With Doctor")
        self.assertEqual(response.data["priority"], "Normal")

    def test_update_missing_patient(self):
        response = self.client.put("/api/patients/nope", {"status": "Gone"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Patient not found.")

    def test_delete_patient(self):
        response = self.client.delete("/api/patients/2")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(len(patients), 2)
        names = [p["name"] for p in self.client.get("/api/queue").data]
        self.assertNotIn("Jane Smith", names)

        response = self.client.delete("/api/patients/2")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(len(patients), 2)


class DoctorTests(APISimpleTestCase):
    def test_list_doctors_in_insertion_order(self):
        response = self.client.get("/api/doctors")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([d["id"] for d in response.data], ["d1", "d2", "d3", "d4"])

    def test_get_doctor(self):
        response = self.client.get("/api/doctors/d3")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Dr. Lee")
        self.assertEqual(response.data["status"], "Off Duty")

    def test_create_doctor(self):
        body = {"name": "Dr. Kim", "specialization": "Neurology", "gender": "Female", "location": "Clinic C"}
        response = self.client.post("/api/doctors", body, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], "Available")
        for key, value in body.items():
            self.assertEqual(response.data[key], value)
        self.assertNotIn(response.data["id"], {"d1", "d2", "d3", "d4"})
        fetched = self.client.get(f"/api/doctors/{response.data['id']}")
        self.assertEqual(fetched.data, response.data)

    def test_create_doctor_requires_every_field(self):
        """Leaving out any one field is rejected and nothing is stored."""
        full = {"name": "Dr. Kim", "specialization": "Neurology", "gender": "Female", "location": "Clinic C"}
        for field in full:
            body = {k: v for k, v in full.items() if k != field}
            response = self.client.post("/api/doctors", body, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "All fields are required for a new doctor.")
            self.assertEqual(response.data["fields"], [field])
            self.assertEqual(len(doctors), 4)

    def test_update_doctor_merges_fields(self):
        """Only the keys sent change; unknown keys are added."""
        response = self.client.put("/api/doctors/d1", {"status": "Busy", "room": "12"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "Busy")
        self.assertEqual(response.data["room"], "12")
        self.assertEqual(response.data["name"], "Dr. Smith")
        self.assertEqual(response.data["specialization"], "General Practice")
        self.assertEqual(response.data["location"], "Clinic A")
        self.assertEqual(self.client.get("/api/doctors/d1").data, response.data)

    def test_update_doctor_keeps_its_id(self):
        response = self.client.put("/api/doctors/d2", {"id": "d9", "location": "Clinic D"}, format="json")
        self.assertEqual(response.data["id"], "d2")
        self.assertEqual(response.data["location"], "Clinic D")
        self.assertEqual(self.client.get("/api/doctors/d9").status_code, status.HTTP_404_NOT_FOUND)

    def test_update_missing_doctor(self):
        response = self.client.put("/api/doctors/d99", {"status": "Busy"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Doctor not found.")

    def test_delete_doctor_then_get(self):
        response = self.client.delete("/api/doctors/d2")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        response = self.client.get("/api/doctors/d2")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(len(doctors), 3)

    def test_delete_missing_doctor(self):
        response = self.client.delete("/api/doctors/d99")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(len(doctors), 4)


class AppointmentTests(APISimpleTestCase):
    booking = {"patientName": "Ann", "doctorId": "d1", "time": "10:30", "date": "2024-05-01"}

    def book(self, **overrides):
        return self.client.post("/api/appointments", {**self.booking, **overrides}, format="json")

    def test_appointment_book_starts_empty(self):
        response = self.client.get("/api/appointments")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_book_appointment(self):
        response = self.book()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], "Booked")
        self.assertEqual(response.data["patientName"], "Ann")
        listed = self.client.get("/api/appointments").data
        self.assertEqual(listed, [response.data])

    def test_book_with_unknown_doctor_is_accepted(self):
        response = self.book(doctorId="no-such-doctor")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["doctorId"], "no-such-doctor")

    def test_book_requires_every_field(self):
        response = self.client.post("/api/appointments", {"patientName": "Ann", "time": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "All fields are required to book an appointment.")
        self.assertEqual(response.data["fields"], ["doctorId", "time", "date"])
        self.assertEqual(len(appointments), 0)

    def test_update_status(self):
        aid = self.book().data["id"]
        response = self.client.put(f"/api/appointments/{aid}", {"status": "Completed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "Completed")
        self.assertEqual(response.data["date"], "2024-05-01")

    def test_update_without_status_clears_it(self):
        """Appointment updates always write status, unlike patient updates."""
        aid = self.book().data["id"]
        response = self.client.put(f"/api/appointments/{aid}", {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data["status"])

    def test_update_missing_appointment(self):
        response = self.client.put("/api/appointments/nope", {"status": "Completed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Appointment not found.")

    def test_cancel_appointment(self):
        aid = self.book().data["id"]
        self.assertEqual(self.client.delete(f"/api/appointments/{aid}").status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.delete(f"/api/appointments/{aid}").status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(len(appointments), 0)

    def test_deleting_doctor_keeps_appointments(self):
        self.book(doctorId="d4")
        self.client.delete("/api/doctors/d4")
        listed = self.client.get("/api/appointments").data
        self.assertEqual([a["doctorId"] for a in listed], ["d4"])
