"""Scroll bookkeeping for a renderer with a pinned frame.

The geometry calculator is stateless; something has to remember where
the cursor was before each print. ScrollTracker is that something: it
owns the running ``offset`` and turns each print into a Frame.

OFFSET SEMANTICS:
- offset starts at the row where rendering began (usually 0)
- every print advances it by the rows printed, with no clamping
- it may run past term_height once the terminal has scrolled;
  the calculator saturates pad/shift in that case
- resize() clamps it back into the new viewport
"""

from __future__ import annotations

from typing import Callable, Optional

from .frame_log import FrameLog, FrameRecord
from .geometry import Frame, Space, check_row_count, compute_frame
from .measure import count_rows


class ScrollTracker:
    """Tracks the cursor offset across prints and computes frame layout.

    Responsibilities:
    - Snapshot terminal/frame state into a Space per print
    - Advance the cursor offset after each print
    - Follow terminal resizes and frame height changes
    - Record each layout decision for diagnostics
    """

    def __init__(
        self,
        term_height: int,
        frame_height: int,
        offset: int = 0,
        debug_logger: Optional[Callable[[str], None]] = None,
        frame_log: Optional[FrameLog] = None,
    ):
        """Initialize tracker.

        Args:
            term_height: Height of the viewport in rows
            frame_height: Height of the pinned frame in rows
            offset: Cursor row where rendering starts
            debug_logger: Optional callback for debug messages
            frame_log: Optional FrameLog for the decision trail
        """
        check_row_count("term_height", term_height)
        check_row_count("frame_height", frame_height)
        check_row_count("offset", offset)
        self.term_height = term_height
        self.frame_height = frame_height
        self.offset = offset
        self.redraws = 0
        self.last_frame: Optional[Frame] = None
        self._debug_logger = debug_logger or (lambda msg: None)
        self._frame_log = frame_log

    def space(self, lines_printed: int) -> Space:
        """Snapshot the current state for a print of ``lines_printed`` rows."""
        return Space(
            term_height=self.term_height,
            offset=self.offset,
            lines_printed=lines_printed,
            frame_height=self.frame_height,
        )

    def advance(self, lines_printed: int) -> Frame:
        """Account for a print and return the frame layout for the redraw.

        Args:
            lines_printed: Rows written by this print

        Returns:
            Frame computed from the offset BEFORE the print
        """
        check_row_count("lines_printed", lines_printed)
        space = self.space(lines_printed)
        frame = compute_frame(space)

        self.offset += lines_printed
        self.redraws += 1
        self.last_frame = frame

        if self._frame_log is not None:
            record = self._frame_log.record(space, frame)
        else:
            record = FrameRecord(space=space, frame=frame)
        self._debug_logger(f"[tracker] {record.line()}")
        return frame

    def print_text(self, text: str, columns: int) -> Frame:
        """Measure ``text`` at ``columns`` wide and advance by its rows."""
        return self.advance(count_rows(text, columns))

    def resize(self, term_height: int) -> None:
        """Follow a terminal resize.

        The cursor cannot sit below the viewport after a resize, so the
        offset is clamped to the new height.
        """
        check_row_count("term_height", term_height)
        if term_height == self.term_height:
            return
        old_height = self.term_height
        self.term_height = term_height
        self.offset = min(self.offset, term_height)
        self._log_event(f"[tracker] resized {old_height} -> {term_height} rows, offset={self.offset}")

    def set_frame_height(self, frame_height: int) -> None:
        check_row_count("frame_height", frame_height)
        if frame_height == self.frame_height:
            return
        self._log_event(f"[tracker] frame height {self.frame_height} -> {frame_height}")
        self.frame_height = frame_height

    def reset(self, offset: int = 0) -> None:
        """Restart tracking, e.g. after the caller cleared the screen."""
        check_row_count("offset", offset)
        self.offset = offset
        self.last_frame = None
        self._log_event(f"[tracker] reset offset={offset}")

    def _log_event(self, msg: str) -> None:
        self._debug_logger(msg)
        if self._frame_log is not None:
            self._frame_log.event(msg)
