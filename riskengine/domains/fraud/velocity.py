"""Per-customer rolling history of recent transaction attempts."""

import threading
from collections import deque
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import structlog

from .models import VelocityRecord

logger = structlog.get_logger()


def _as_utc(moment: datetime) -> datetime:
    # Naive instants are local wall-clock time, as everywhere else in the engine.
    return moment.astimezone(UTC)


class _History:
    __slots__ = ("lock", "records")

    def __init__(self, capacity: int) -> None:
        self.lock = threading.Lock()
        self.records: deque[VelocityRecord] = deque(maxlen=capacity)


class VelocityTracker:
    """Tracks the last few transaction attempts for each customer key.

    Each key keeps at most ``capacity`` records; appending to a full history
    evicts the oldest. Keys themselves are never expired, so memory grows with
    the number of distinct customers seen by the process.

    Updates for one key are serialized by that key's lock; the registry lock
    is only held while looking up or creating a key's history.
    """

    def __init__(self, capacity: int = 10, window: timedelta = timedelta(hours=1)) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._window = window
        self._histories: dict[str, _History] = {}
        self._registry_lock = threading.Lock()
        logger.info(
            "velocity_tracker_initialized",
            capacity=capacity,
            window_seconds=window.total_seconds(),
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def window(self) -> timedelta:
        return self._window

    def _history_for(self, key: str) -> _History:
        with self._registry_lock:
            history = self._histories.get(key)
            if history is None:
                history = _History(self._capacity)
                self._histories[key] = history
            return history

    def record_and_count(self, key: str | None, timestamp: datetime, amount: Decimal) -> int:
        """Count the key's attempts inside the window, then record this one.

        ``timestamp`` is the query instant: the window is measured back from
        it and it is stored as the new record's time. The returned count
        excludes the attempt being recorded. An empty key is not tracked.

        Naive and aware instants may be mixed; both are compared in UTC.
        """
        if not key:
            return 0

        timestamp = _as_utc(timestamp)

        history = self._history_for(key)
        with history.lock:
            records = history.records
            count = sum(1 for r in records if timestamp - r.timestamp < self._window)
            # Keep records in non-decreasing time order if the clock steps back.
            recorded_at = max(timestamp, records[-1].timestamp) if records else timestamp
            records.append(VelocityRecord(timestamp=recorded_at, amount=amount))
        return count

    def history(self, key: str) -> list[VelocityRecord]:
        """Snapshot of a key's records, oldest first."""
        with self._registry_lock:
            history = self._histories.get(key)
        if history is None:
            return []
        with history.lock:
            return list(history.records)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._histories)

    def clear(self) -> None:
        with self._registry_lock:
            self._histories.clear()
