import logging
from typing import Any, Optional

from frontdesk.services.tables import patients

logger = logging.getLogger(__name__)

URGENT = 'Urgent'


def queue() -> list[dict]:
    """Every patient, ``Urgent`` ones first.

    The sort is stable, so within each priority class patients keep the
    order they were added in.  The stored table is not reordered.
    """
    rows = patients.all()
    return sorted(rows, key=lambda p: p.get('priority') != URGENT)


def create_patient(*, name: Any) -> dict:
    patient = patients.insert({'name': name, 'status': 'Waiting', 'priority': 'Normal'})
    logger.info('patient %s added to queue', patient['id'])
    return patient


def update_patient(pk: str, *, status: Optional[Any] = None, priority: Optional[Any] = None) -> dict:
    # Empty values leave the field as it was.
    changes = {}
    if status:
        changes['status'] = status
    if priority:
        changes['priority'] = priority
    patient = patients.update(pk, changes)
    logger.info('patient %s updated: %s', pk, sorted(changes))
    return patient


def delete_patient(pk: str) -> None:
    patients.delete(pk)
    logger.info('patient %s removed from queue', pk)
