# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster row data access.
One row per crew per cycle, keyed by an auto-incremented integer id.
NO business rules here — pure CRUD.
"""

from typing import Any, Optional


class RosterRepository:
    """In-memory roster row storage."""

    def __init__(self) -> None:
        self._store: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return sorted(
            self._store.values(),
            key=lambda r: (r["crew_name"], r.get("cycle_number") or 0),
        )

    def get_by_id(self, row_id: int) -> Optional[dict[str, Any]]:
        return self._store.get(row_id)

    def get_by_crew(self, crew_id: str) -> list[dict[str, Any]]:
        return sorted(
            (r for r in self._store.values() if r["crew_id"] == crew_id),
            key=lambda r: r.get("cycle_number") or 0,
        )

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def insert(self, row: dict[str, Any]) -> dict[str, Any]:
        record = dict(row, id=self._next_id)
        self._store[self._next_id] = record
        self._next_id += 1
        return record

    def update(self, row_id: int, updates: dict[str, Any]) -> Optional[dict[str, Any]]:
        record = self._store.get(row_id)
        if record is None:
            return None
        record.update({k: v for k, v in updates.items() if k != "id"})
        return record

    def delete(self, row_id: int) -> Optional[dict[str, Any]]:
        return self._store.pop(row_id, None)

    def delete_by_crew(self, crew_id: str) -> int:
        ids = [i for i, r in self._store.items() if r["crew_id"] == crew_id]
        for row_id in ids:
            del self._store[row_id]
        return len(ids)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
        self._next_id = 1
