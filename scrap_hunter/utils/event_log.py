"""Thread-safe event log for simulation events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single simulation event for the event feed."""

    tick: int
    category: str
    message: str
    entity_ids: tuple[int, ...] = ()  # pursuers involved, if any


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice."""

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int | None = 1000) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_tick(self, tick: int) -> list[SimEvent]:
        """Return all events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def categories(self) -> list[str]:
        with self._lock:
            return [e.category for e in self._buffer]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
