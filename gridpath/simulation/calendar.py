"""Pending-event calendar ordered by scheduled time."""

from __future__ import annotations

import heapq
import itertools

from gridpath.simulation.events import Event


class EventCalendar:
    """Min-priority queue of events; equal times pop in insertion order.

    There is no cancellation: once pushed, an event stays until popped.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Event]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def push(self, event: Event) -> None:
        heapq.heappush(self._heap, (event.time, next(self._counter), event))

    def pop(self) -> Event:
        """Remove and return the earliest event. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from empty event calendar")
        return heapq.heappop(self._heap)[2]

    def peek_time(self) -> int | None:
        """Time of the earliest event, or None when empty."""
        if not self._heap:
            return None
        return self._heap[0][0]
