"""
In-memory resource tables.

Each table maps a record id to a plain dict and keeps insertion order.
Tables are created once per process, loaded with the fixed demo records
and never written to disk.  All access goes through the table methods;
callers always receive copies, so a handler cannot mutate a stored record
behind the table's back.
"""
from __future__ import annotations

import copy
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings

from frontdesk.exceptions import RecordNotFound

Record = Dict[str, Any]


SEED_PATIENTS: tuple[Record, ...] = (
    {'id': '1', 'name': 'John Doe', 'status': 'Waiting', 'priority': 'Normal'},
    {'id': '2', 'name': 'Jane Smith', 'status': 'With Doctor', 'priority': 'Normal'},
    {'id': '3', 'name': 'Bob Johnson', 'status': 'Waiting', 'priority': 'Urgent'},
)

SEED_DOCTORS: tuple[Record, ...] = (
    {'id': 'd1', 'name': 'Dr. Smith', 'specialization': 'General Practice', 'status': 'Available', 'gender': 'Male', 'location': 'Clinic A'},
    {'id': 'd2', 'name': 'Dr. Johnson', 'specialization': 'Pediatrics', 'status': 'Busy', 'gender': 'Female', 'location': 'Clinic B'},
    {'id': 'd3', 'name': 'Dr. Lee', 'specialization': 'Cardiology', 'status': 'Off Duty', 'gender': 'Female', 'location': 'Clinic A'},
    {'id': 'd4', 'name': 'Dr. Patel', 'specialization': 'Dermatology', 'status': 'Available', 'gender': 'Male', 'location': 'Clinic B'},
)

SEED_APPOINTMENTS: tuple[Record, ...] = ()


def new_id() -> str:
    return str(uuid.uuid4())


class ResourceTable:
    """Ordered ``id -> record`` mapping for one resource type.

    ``label`` is the human name used in error messages ("Doctor" gives
    "Doctor not found.").  Every method holds the table lock for its whole
    duration so one operation never observes another half-done.
    """

    def __init__(self, label: str, seed: Iterable[Record] = ()):
        self.label = label
        self._seed = tuple(copy.deepcopy(r) for r in seed)
        self._rows: Dict[str, Record] = {}
        self._lock = threading.RLock()
        self.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def __contains__(self, pk: object) -> bool:
        with self._lock:
            return pk in self._rows

    def reset(self, *, seed: bool = True) -> None:
        """Drop every record and, unless ``seed`` is false, reload the seed records."""
        with self._lock:
            self._rows = {}
            if seed:
                for row in self._seed:
                    self._rows[row['id']] = copy.deepcopy(row)

    def all(self) -> List[Record]:
        with self._lock:
            return [dict(r) for r in self._rows.values()]

    def get(self, pk: str) -> Record:
        with self._lock:
            row = self._rows.get(pk)
            if row is None:
                raise RecordNotFound(f'{self.label} not found.')
            return dict(row)

    def insert(self, fields: Record) -> Record:
        """Store ``fields`` under a freshly generated id and return the stored record."""
        with self._lock:
            pk = new_id()
            while pk in self._rows:
                pk = new_id()
            row = {'id': pk, **fields}
            self._rows[pk] = row
            return dict(row)

    def update(self, pk: str, changes: Record) -> Record:
        """Overlay ``changes`` on the stored record.  The id itself is never changed."""
        with self._lock:
            row = self._rows.get(pk)
            if row is None:
                raise RecordNotFound(f'{self.label} not found.')
            merged = {**row, **changes, 'id': row['id']}
            self._rows[pk] = merged
            return dict(merged)

    def delete(self, pk: str) -> None:
        with self._lock:
            if self._rows.pop(pk, None) is None:
                raise RecordNotFound(f'{self.label} not found.')


patients = ResourceTable('Patient', SEED_PATIENTS)
doctors = ResourceTable('Doctor', SEED_DOCTORS)
appointments = ResourceTable('Appointment', SEED_APPOINTMENTS)

ALL_TABLES: dict[str, ResourceTable] = {
    'patients': patients,
    'doctors': doctors,
    'appointments': appointments,
}


def reset_all(seed: Optional[bool] = None) -> None:
    """Return every table to its startup state."""
    if seed is None:
        seed = getattr(settings, 'CLINIC_SEED_DATA', True)
    for table in ALL_TABLES.values():
        table.reset(seed=seed)


def table_sizes() -> dict[str, int]:
    return {name: len(table) for name, table in ALL_TABLES.items()}


reset_all()
