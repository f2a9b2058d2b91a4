"""pinframe - geometry for a frame pinned below scrolling terminal output.

Quick Start
-----------
```python
from pinframe import ScrollTracker

tracker = ScrollTracker(term_height=40, frame_height=6)
frame = tracker.print_text(log_chunk, columns=120)
# emit frame.pad blank rows, move the frame down frame.shift rows
```

Core Components
---------------
- **compute_frame**: pure Space -> Frame calculation
- **ScrollTracker**: running cursor offset across prints
- **count_rows**: rows occupied by printed text
"""

from .geometry import Frame, Space, check_row_count, compute_frame
from .frame_log import FrameLog, FrameRecord
from .measure import count_rows, strip_ansi, visual_width
from .tracker import ScrollTracker

__all__ = [
    "Frame",
    "Space",
    "compute_frame",
    "check_row_count",
    "FrameLog",
    "FrameRecord",
    "count_rows",
    "strip_ansi",
    "visual_width",
    "ScrollTracker",
]
