"""Frame geometry for a pinned panel at the bottom of a scrolling terminal.

A renderer that keeps a status/progress frame pinned below ordinary log
output has to decide, on every redraw, two numbers:

- pad:   blank rows to insert so the frame does not cover freshly printed text
- shift: rows the frame moves down to stay attached to the printed text

ROW TERMINOLOGY:
- term_height   = rows in the visible viewport
- offset        = cursor row before the print (may exceed term_height)
- lines_printed = rows written by the print being accounted for
- frame_height  = nominal rows of the pinned frame

All arithmetic floors at zero. Python ints never wrap, so the sums
(offset + frame, offset + lines) are computed exactly.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


def check_row_count(name: str, value: int) -> None:
    """Raise unless value is a non-negative int (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _saturating_sub(a: int, b: int) -> int:
    return max(0, a - b)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Frame:
    """Padding and shift instructions for one redraw."""

    pad: int
    shift: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class Space:
    """Snapshot of terminal and frame state, taken fresh per redraw.

    No relationship between the fields is required: a frame taller than
    the terminal, or an offset far below the viewport, are both valid.
    """

    term_height: int
    offset: int
    lines_printed: int
    frame_height: int

    def __post_init__(self) -> None:
        for name in ("term_height", "offset", "lines_printed", "frame_height"):
            check_row_count(name, getattr(self, name))

    def frame(self) -> Frame:
        return compute_frame(self)


def compute_frame(space: Space) -> Frame:
    """Compute padding and shift for the pinned frame.

    Args:
        space: Terminal/frame snapshot for the print being accounted for

    Returns:
        Frame with ``pad`` in ``[0, max(usable_frame, 1) - 1]`` and
        ``shift`` in ``[0, lines_printed]``
    """
    term_height = space.term_height
    offset = space.offset
    lines_printed = space.lines_printed

    # The frame may be clipped by a short terminal; the math uses what fits.
    usable_frame = _clamp(space.frame_height, 0, term_height)

    # Rows between the cursor and the frame's flush-bottom resting place
    remaining = _saturating_sub(term_height, offset + usable_frame)

    # Frame follows each printed line until it reaches the bottom
    shift = min(remaining, lines_printed)

    # Overlap of the printed content's end with the flush-bottom frame
    end_y = offset + lines_printed
    frame_cap = term_height - usable_frame
    pad_limit = max(usable_frame, 1) - 1
    pad = _clamp(_saturating_sub(end_y, frame_cap), 0, pad_limit)

    return Frame(pad=pad, shift=shift)
