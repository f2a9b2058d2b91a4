"""Row accounting for printed text.

The geometry calculator needs ``lines_printed`` in terminal ROWS, not in
newline-separated strings: a log line wider than the terminal soft-wraps
onto several rows, and escape sequences take bytes but no columns.
"""

from __future__ import annotations

import re

import wcwidth


# ANSI escape sequence pattern (ECMA-48)
# Order matters: the two-byte fallback would otherwise eat ESC [ / ESC ]
_ANSI_ESCAPE_PATTERN = re.compile(
    r'\x1b\]'  # OSC sequences: ESC ]
    r'[^\x07\x1b]*'  # data
    r'(?:\x07|\x1b\\)'  # terminator: BEL or ESC \
    r'|'
    r'\x1b[PX^_]'  # DCS/SOS/PM/APC: ESC P/X/^/_ ... ESC \
    r'[^\x1b]*'
    r'\x1b\\'
    r'|'
    r'\x1b\['  # CSI sequences: ESC [
    r'[0-?]*'  # parameter bytes, incl. : < = > ?
    r'[ -/]*'  # intermediate bytes
    r'[@-~]'  # final byte
    r'|'
    r'\x1b'  # nF/Fp/Fe/Fs escapes, e.g. ESC ( B charset select
    r'[ -/]*'
    r'[0-~]'
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text.

    Escape codes have zero visual width, so they must be stripped
    before widths are measured.
    """
    return _ANSI_ESCAPE_PATTERN.sub('', text)


def visual_width(line: str) -> int:
    """Return the display width of a single line.

    Uses wcwidth to account for wide (CJK, emoji) and combining
    characters. Control characters count as zero columns.
    """
    width = 0
    for ch in strip_ansi(line):
        w = wcwidth.wcwidth(ch)
        if w < 0:
            w = 0
        width += w
    return width


def count_rows(text: str, columns: int) -> int:
    """Count terminal rows occupied by ``text`` printed from column 0.

    Args:
        text: Printed text, possibly containing escape sequences
        columns: Terminal width in columns (chars per row)

    Returns:
        Number of rows, counting soft-wrapped continuation rows
    """
    if columns <= 0:
        raise ValueError(f"columns must be positive, got {columns}")
    if not text:
        return 0

    lines = text.replace("\r\n", "\n").split("\n")
    # A trailing newline ends the last line; it does not open a new one
    if lines[-1] == "":
        lines.pop()

    rows = 0
    for line in lines:
        width = visual_width(line)
        if width == 0:
            rows += 1
        else:
            rows += -(-width // columns)
    return rows
