"""
Payment Store — In-memory ledger with dependency injection for FastAPI.
Lives for the lifetime of the process; nothing is persisted.
"""
import threading
from typing import Optional

from fastapi import Request

from tuition_api.models.payment import PaymentRecord


class PaymentStore:
    """Append-only, insertion-ordered collection of payment records.

    Sync routes run on a thread pool, so every read and write holds the lock.
    """

    def __init__(self):
        self._records: dict[str, PaymentRecord] = {}
        self._lock = threading.Lock()

    def append(self, record: PaymentRecord) -> PaymentRecord:
        with self._lock:
            if record.id in self._records:
                raise ValueError(f"Duplicate payment id: {record.id}")
            self._records[record.id] = record
        return record

    def find_by_id(self, payment_id: str) -> Optional[PaymentRecord]:
        with self._lock:
            return self._records.get(payment_id)

    def list_all(self) -> list[PaymentRecord]:
        with self._lock:
            return list(self._records.values())

    def delete_by_id(self, payment_id: str) -> bool:
        with self._lock:
            return self._records.pop(payment_id, None) is not None

    def clear(self) -> int:
        """Remove every record and return how many there were."""
        with self._lock:
            count = len(self._records)
            self._records.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def get_store(request: Request) -> PaymentStore:
    """FastAPI dependency: the store created with the application."""
    return request.app.state.store
