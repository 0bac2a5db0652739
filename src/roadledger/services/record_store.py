"""In-memory record store mirroring the backend's bilty list."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from ..errors import DeleteError, LoadError, NetworkError, SaveError
from ..logging_config import get_logger
from ..models.bilty import BiltyRecord
from .gateway import BiltyGateway

logger = get_logger(__name__)


class RecordStore:
    """Ordered list of records, most recently created first.

    Every mutation goes through the gateway first; the local list only changes
    after the backend has confirmed the operation.
    """

    def __init__(self, gateway: BiltyGateway) -> None:
        self.gateway = gateway
        self._records: list[BiltyRecord] = []

    @property
    def records(self) -> tuple[BiltyRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BiltyRecord]:
        return iter(tuple(self._records))

    @property
    def is_empty(self) -> bool:
        return not self._records

    def find(self, record_id: Optional[int]) -> Optional[BiltyRecord]:
        if record_id is None:
            return None
        return next((r for r in self._records if r.id == record_id), None)

    def clear(self) -> None:
        self._records = []

    def list(self) -> tuple[BiltyRecord, ...]:
        """Fetch every record and replace the local collection."""

        try:
            fetched = self.gateway.list_bilty()
        except NetworkError as exc:
            raise LoadError(exc.message) from exc
        self._records = _dedupe(fetched)
        logger.info("Records loaded", extra={"count": len(self._records)})
        return self.records

    def create(self, draft: Mapping[str, str]) -> BiltyRecord:
        try:
            saved = self.gateway.create_bilty(draft)
        except NetworkError as exc:
            raise SaveError(exc.message) from exc
        # Keep ids unique if the backend echoes an id already held locally
        self._records = [r for r in self._records if saved.id is None or r.id != saved.id]
        self._records.insert(0, saved)
        logger.info("Record created", extra={"record_id": saved.id})
        return saved

    def update(self, record_id: int, draft: Mapping[str, str]) -> BiltyRecord:
        try:
            saved = self.gateway.update_bilty(record_id, draft)
        except NetworkError as exc:
            raise SaveError(exc.message) from exc
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                self._records[index] = saved
                break
        else:
            logger.warning("Updated record not held locally", extra={"record_id": record_id})
        return saved

    def delete(self, record_id: int) -> None:
        try:
            self.gateway.delete_bilty(record_id)
        except NetworkError as exc:
            raise DeleteError(exc.message) from exc
        self._records = [r for r in self._records if r.id != record_id]
        logger.info("Record deleted", extra={"record_id": record_id})


def _dedupe(records: list[BiltyRecord]) -> list[BiltyRecord]:
    """Drop repeated ids, keeping the first occurrence and the backend's order."""

    seen: set[int] = set()
    unique: list[BiltyRecord] = []
    for record in records:
        if record.id is not None:
            if record.id in seen:
                continue
            seen.add(record.id)
        unique.append(record)
    return unique
