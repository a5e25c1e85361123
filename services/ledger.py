"""Shared behaviour of the in-memory ledgers."""

import threading
from typing import Callable, Generic, Iterable, List, Optional, TypeVar
from logger import get_logger

logger = get_logger()

T = TypeVar("T")


class Ledger(Generic[T]):
    """In-memory collection of one record type, persisted on every change.

    Subclasses provide ``_load()`` and ``_save(records)`` against the
    record store. Every mutation and every snapshot read holds the ledger
    lock, so a reader never sees a half-applied update from another thread.

    Args:
        store: RecordStore used for persistence.
        on_change: Optional callback invoked after each persisted mutation.
    """

    record_name = "record"

    def __init__(self, store, on_change: Optional[Callable[[], None]] = None):
        self.store = store
        self.on_change = on_change
        self._lock = threading.RLock()
        self._records: List[T] = []
        self.reload()

    def _load(self) -> List[T]:
        raise NotImplementedError

    def _save(self, records: List[T]) -> None:
        raise NotImplementedError

    def reload(self) -> None:
        """Replace the in-memory collection with the stored one."""
        with self._lock:
            self._records = self._load()
        logger.debug(f"Loaded {len(self._records)} {self.record_name}(s)")

    def snapshot(self) -> List[T]:
        """Copy of the collection, in insertion order.

        The records themselves are shared with the ledger. Aggregates over
        values that another thread mutates must be computed under the lock.
        """
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def find(self, record_id: str) -> Optional[T]:
        """Get a record by ID, or None if not found."""
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    def add(self, record: T) -> T:
        """Append a record and persist the collection.

        Returns:
            The same record.
        """
        with self._lock:
            self._records.append(record)
            self._persist()
        logger.debug(f"Added {self.record_name} {record.id}")
        return record

    def delete(self, record_id: str) -> bool:
        """Delete every record with the given ID.

        Returns:
            True if a record was deleted, False if not found.
        """
        with self._lock:
            kept = [r for r in self._records if r.id != record_id]
            removed = len(self._records) - len(kept)
            self._records = kept
            self._persist()

        if removed:
            logger.debug(f"Deleted {self.record_name} {record_id}")
        return removed > 0

    def delete_at(self, indices: Iterable[int]) -> int:
        """Delete the records at the given positions.

        Positions refer to the collection before any removal. Out of range
        positions are ignored.

        Returns:
            Number of records deleted.
        """
        positions = set(indices)
        with self._lock:
            kept = [r for i, r in enumerate(self._records) if i not in positions]
            removed = len(self._records) - len(kept)
            self._records = kept
            self._persist()

        logger.debug(f"Deleted {removed} {self.record_name}(s) by position")
        return removed

    def _persist(self) -> None:
        # Caller holds the lock
        self._save(self._records)
        if self.on_change is not None:
            self.on_change()
