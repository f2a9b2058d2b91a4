"""Bounded history of layout decisions.

Each redraw decision is kept as the (Space, Frame) pair that produced it,
so a diagnostics dump can show exactly what the calculator was fed.
Tracker events (resize, reset, frame height changes) are kept as text.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from .geometry import Frame, Space


@dataclass(frozen=True)
class FrameRecord:
    space: Space
    frame: Frame

    @property
    def saturated(self) -> bool:
        """True when the print ran past the frame's resting place."""
        return self.frame.shift < self.space.lines_printed

    def line(self) -> str:
        s, f = self.space, self.frame
        return (
            f"offset={s.offset} lines={s.lines_printed} "
            f"term={s.term_height} frame={s.frame_height} "
            f"-> pad={f.pad} shift={f.shift}"
        )


@dataclass
class FrameLog:
    """Decision and event history for one ScrollTracker.

    Categories for text(): frames, events
    """

    max_records: int = 2000
    records: Deque[FrameRecord] = field(init=False)
    events: Deque[str] = field(init=False)

    def __post_init__(self) -> None:
        self.records = deque(maxlen=self.max_records)
        self.events = deque(maxlen=self.max_records)

    def record(self, space: Space, frame: Frame) -> FrameRecord:
        entry = FrameRecord(space=space, frame=frame)
        self.records.append(entry)
        return entry

    def event(self, message: str) -> None:
        for line in message.splitlines() or [message]:
            self.events.append(line)

    def last(self) -> Optional[FrameRecord]:
        return self.records[-1] if self.records else None

    def saturated_count(self) -> int:
        return sum(1 for r in self.records if r.saturated)

    def lines(self, category: str) -> List[str]:
        if category == "frames":
            return [r.line() for r in self.records]
        if category == "events":
            return list(self.events)
        raise KeyError(f"unknown log category: {category!r}")

    def text(self, category: str) -> str:
        return "\n".join(self.lines(category))

    def clear(self) -> None:
        self.records.clear()
        self.events.clear()
