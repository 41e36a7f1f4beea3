"""Storage service for telemetry readings (in-memory only, no persistence)"""
import threading
from collections import deque
from typing import Deque, List, Optional

from models.telemetry import Reading


class TelemetryStore:
    """
    Bounded FIFO history of readings plus a pointer to the latest one.

    History and latest are guarded by one lock and always change together,
    so readers never see an append applied to one but not the other.
    Readings must be validated before they reach append().

    Readings are copied (shallow) on the way in and on the way out, so
    callers cannot change stored history by mutating a dict they hold.
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._history: Deque[Reading] = deque(maxlen=capacity)
        self._latest: Optional[Reading] = None
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, reading: Reading):
        """Push a reading to the tail, evicting the oldest if full"""
        stored = dict(reading)
        with self._lock:
            self._history.append(stored)
            self._latest = stored

    def latest(self) -> Optional[Reading]:
        """Most recent reading, or None if nothing was appended yet"""
        with self._lock:
            latest = self._latest
        return dict(latest) if latest is not None else None

    def recent(self, n: int) -> List[Reading]:
        """Copy of the last n readings, oldest first"""
        n = max(n, 1)
        with self._lock:
            snapshot = list(self._history)
        return [dict(reading) for reading in snapshot[-n:]]

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)
