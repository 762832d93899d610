from __future__ import annotations

from typing import Sequence

from ..datastore.store import RecordStore
from .department_model import Department
from .department_repository import DepartmentRepository


class InMemoryDepartmentRepository(DepartmentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Department]:
        return self._store.list_departments()
