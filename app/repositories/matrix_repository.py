# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Training matrix (certification records) data access.
"""

import uuid
from typing import Any, Optional


class MatrixRepository:
    """In-memory certification record storage."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return list(self._store.values())

    def get_by_crew(self, crew_id: str) -> list[dict[str, Any]]:
        return sorted(
            (r for r in self._store.values() if r["crew_id"] == crew_id),
            key=lambda r: r["cert_type"],
        )

    # ── Write ──

    def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        stored = dict(record, id=str(uuid.uuid4()))
        self._store[stored["id"]] = stored
        return stored

    def update_field(self, record_id: str, field: str, value: Any) -> Optional[dict[str, Any]]:
        record = self._store.get(record_id)
        if record is None:
            return None
        record[field] = value
        return record

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
