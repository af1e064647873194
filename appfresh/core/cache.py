"""Single-slot holder for the most recently fetched listing."""

import threading

from appfresh.core.models import ListingRecord


class ListingCache:
    """Mutex-guarded slot holding at most one ``ListingRecord``.

    Each ``store`` overwrites the slot. There is no expiry: a record from an
    old check is returned until the next successful fetch replaces it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._record: ListingRecord | None = None

    def store(self, record: ListingRecord | None):
        with self._lock:
            self._record = record

    def read(self) -> ListingRecord | None:
        with self._lock:
            return self._record
