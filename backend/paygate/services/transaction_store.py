"""Transaction bookkeeping for webhook-confirmed charges.

TransactionStore is the key-value seam the event intake writes through. The
in-memory implementation keeps records for the process lifetime only; a
persistent store can replace it without touching the intake logic.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable


@dataclass
class TransactionRecord:
    reference: str
    amount: Decimal  # major units
    customer_email: str
    status: str
    recorded_at: datetime


@runtime_checkable
class TransactionStore(Protocol):
    """Key-value store of TransactionRecords keyed by reference."""

    def get(self, reference: str) -> TransactionRecord | None: ...

    def upsert(self, record: TransactionRecord) -> None: ...

    def list(self) -> list[TransactionRecord]: ...


class InMemoryTransactionStore:
    """Process-local TransactionStore. Last write wins; no eviction."""

    def __init__(self) -> None:
        self._records: dict[str, TransactionRecord] = {}
        self._lock = threading.Lock()

    def get(self, reference: str) -> TransactionRecord | None:
        with self._lock:
            return self._records.get(reference)

    def upsert(self, record: TransactionRecord) -> None:
        with self._lock:
            self._records[record.reference] = record

    def list(self) -> list[TransactionRecord]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
