"""Typed events scheduled on the calendar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gridpath.domain.individual import Individual


class EventKind(str, Enum):
    """Strategy tag selecting how an event acts on its individual."""

    MOVE = "move"
    DEATH = "death"
    REPRODUCE = "reproduce"


@dataclass(frozen=True, eq=False)
class Event:
    """A strategy scheduled for ``individual`` at integer simulated ``time``."""

    time: int
    kind: EventKind
    individual: Individual | None = None
