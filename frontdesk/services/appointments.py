import logging
from typing import Any

from frontdesk.services.tables import appointments

logger = logging.getLogger(__name__)


def list_appointments() -> list[dict]:
    return appointments.all()


def book_appointment(*, patientName: Any, doctorId: Any, time: Any, date: Any) -> dict:
    """Book an appointment.  ``doctorId`` is stored as given, without a roster lookup."""
    appointment = appointments.insert({
        'patientName': patientName,
        'doctorId': doctorId,
        'time': time,
        'date': date,
        'status': 'Booked',
    })
    logger.info('appointment %s booked with doctor %s', appointment['id'], doctorId)
    return appointment


def set_appointment_status(pk: str, status: Any) -> dict:
    # Unlike patient updates, the status is always written, even when None.
    appointment = appointments.update(pk, {'status': status})
    logger.info('appointment %s status set to %r', pk, status)
    return appointment


def cancel_appointment(pk: str) -> None:
    appointments.delete(pk)
    logger.info('appointment %s deleted', pk)
