# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Crew master (staff directory) data access.
"""

import uuid
from typing import Any, Optional


class StaffRepository:
    """In-memory crew master storage, keyed by string id."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return sorted(self._store.values(), key=lambda s: s["crew_name"])

    def get_by_id(self, staff_id: str) -> Optional[dict[str, Any]]:
        return self._store.get(staff_id)

    def exists(self, staff_id: str) -> bool:
        return staff_id in self._store

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        staff_id = record.get("id") or str(uuid.uuid4())
        stored = dict(record, id=staff_id)
        self._store[staff_id] = stored
        return stored

    def update(self, staff_id: str, updates: dict[str, Any]) -> Optional[dict[str, Any]]:
        record = self._store.get(staff_id)
        if record is None:
            return None
        record.update({k: v for k, v in updates.items() if k != "id"})
        return record

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
