from __future__ import annotations

from typing import Optional, Sequence

from ..datastore.store import RecordStore
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, store: RecordStore):
        self._store = store
        self._by_id = {s.student_id: s for s in store.list_students()}

    def list_all(self) -> Sequence[Student]:
        return self._store.list_students()

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._by_id.get(str(student_id))
