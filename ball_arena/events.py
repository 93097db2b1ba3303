"""Bounded, queryable record of resolved collisions and removals."""
from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Any

REMOVED = "removed"


@dataclass(frozen=True)
class Event:
    tick: int
    type: str
    data: dict[str, Any]

    def involves(self, ball_id: int) -> bool:
        if self.type == REMOVED:
            return self.data.get("ball") == ball_id
        return ball_id in (self.data.get("a"), self.data.get("b"))


class EventLog:
    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)

    def emit(self, tick: int, type: str, **data: Any) -> None:
        self._events.append(Event(tick=tick, type=type, data=data))

    def query(
        self,
        type: str | None = None,
        after: int | None = None,
        before: int | None = None,
        ball: int | None = None,
    ) -> list[Event]:
        """Events matching every given filter, oldest first.

        `after` and `before` are exclusive tick bounds; `ball` keeps the
        events that name that ball id.
        """
        return [
            e for e in self._events
            if (type is None or e.type == type)
            and (after is None or e.tick > after)
            and (before is None or e.tick < before)
            and (ball is None or e.involves(ball))
        ]

    def last(self, type: str) -> Event | None:
        for e in reversed(self._events):
            if e.type == type:
                return e
        return None

    def tally(self) -> Counter[str]:
        return Counter(e.type for e in self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
