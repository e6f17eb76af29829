"""Scheduled wire state changes."""

from __future__ import annotations

from dataclasses import dataclass

from logicsim.wire import Wire


@dataclass
class Event:
    """A request to set ``wire`` to ``state`` at simulation ``time``."""

    time: int
    wire: Wire
    state: str


def event_less(e1: Event, e2: Event) -> bool:
    """Order events by time, earliest first."""
    return e1.time < e2.time