"""
Submission windows for resume books.

A resume book only accepts submissions between its start and end dates.
``resolve_status`` tells where an instant falls relative to that window,
which is what the resume book page branches on to decide between
"opens on", "closed on" and showing the form.  Nothing here touches
Django, so the functions can be used and tested on their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class WindowStatus(str, Enum):
    """Position of an instant relative to a ``TimeWindow``."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAST = "past"


@dataclass(frozen=True)
class TimeWindow:
    """A closed interval ``[start, end]`` of time."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Window starts after it ends ({self.start} > {self.end})")


def resolve_status(now: datetime, window: TimeWindow) -> WindowStatus:
    """Classify ``now`` against ``window``.

    Both boundaries are inclusive: an instant equal to ``window.start`` or
    ``window.end`` is ACTIVE.
    """
    if now < window.start:
        return WindowStatus.UPCOMING
    if now > window.end:
        return WindowStatus.PAST
    return WindowStatus.ACTIVE
