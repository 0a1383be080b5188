import logging
from typing import Any, Dict

from frontdesk.services.tables import doctors

logger = logging.getLogger(__name__)


def list_doctors() -> list[dict]:
    return doctors.all()


def get_doctor(pk: str) -> dict:
    return doctors.get(pk)


def create_doctor(*, name: Any, specialization: Any, gender: Any, location: Any) -> dict:
    doctor = doctors.insert({
        'name': name,
        'specialization': specialization,
        'gender': gender,
        'location': location,
        'status': 'Available',
    })
    logger.info('doctor %s created', doctor['id'])
    return doctor


def update_doctor(pk: str, changes: Dict[str, Any]) -> dict:
    """Merge ``changes`` into the doctor's profile.

    Every key present in ``changes`` overwrites, including keys the
    profile does not have yet and falsy values.  Keys not present are
    left alone.  The id cannot be changed.
    """
    doctor = doctors.update(pk, {k: v for k, v in changes.items() if k != 'id'})
    logger.info('doctor %s updated: %s', pk, sorted(changes))
    return doctor


def delete_doctor(pk: str) -> None:
    # Appointments naming this doctor are kept as they are.
    doctors.delete(pk)
    logger.info('doctor %s deleted', pk)
