"""CLI for the pinframe command."""

import json
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer

from .geometry import Space, compute_frame
from .measure import count_rows


app = typer.Typer(
    help="Inspect pinned-frame geometry for a scrolling terminal",
    add_completion=False,
)


def _detected_height() -> int:
    return shutil.get_terminal_size().lines


@app.command()
def calc(
    offset: int = typer.Option(..., "--offset", "-o", min=0, help="Cursor row before the print"),
    lines: int = typer.Option(..., "--lines", "-l", min=0, help="Rows printed"),
    frame_height: int = typer.Option(..., "--frame-height", "-f", min=0, help="Pinned frame height"),
    term_height: Optional[int] = typer.Option(
        None, "--term-height", "-t", min=0, help="Terminal height (default: detected)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
):
    """
    Compute padding and shift for a single print.

    Examples:
        # 16-row terminal, 5-row frame, 8 lines printed from row 6
        pinframe calc -t 16 -f 5 -o 6 -l 8
    """
    height = term_height if term_height is not None else _detected_height()
    frame = compute_frame(
        Space(term_height=height, offset=offset, lines_printed=lines, frame_height=frame_height)
    )
    if as_json:
        typer.echo(json.dumps(frame.as_dict()))
    else:
        typer.echo(f"pad={frame.pad} shift={frame.shift}")


@app.command()
def sweep(
    lines: int = typer.Option(..., "--lines", "-l", min=0, help="Rows printed"),
    frame_height: int = typer.Option(..., "--frame-height", "-f", min=0, help="Pinned frame height"),
    term_height: Optional[int] = typer.Option(
        None, "--term-height", "-t", min=0, help="Terminal height (default: detected)"
    ),
    max_offset: Optional[int] = typer.Option(
        None, "--max-offset", min=0, help="Last offset in the table (default: terminal height)"
    ),
):
    """
    Print pad/shift for every offset from 0 up to --max-offset.
    """
    height = term_height if term_height is not None else _detected_height()
    last = max_offset if max_offset is not None else height

    typer.echo(f"{'offset':>6} {'pad':>5} {'shift':>5}")
    for offset in range(last + 1):
        frame = Space(
            term_height=height, offset=offset, lines_printed=lines, frame_height=frame_height
        ).frame()
        typer.echo(f"{offset:>6} {frame.pad:>5} {frame.shift:>5}")


@app.command()
def measure(
    path: Optional[Path] = typer.Argument(None, help="File to measure (default: stdin)"),
    columns: int = typer.Option(80, "--columns", "-c", min=1, help="Terminal width"),
):
    """
    Count the terminal rows a text occupies once soft-wrapped.
    """
    if path is None:
        text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
    else:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            typer.echo(f"Cannot read {path}: {e}", err=True)
            raise typer.Exit(code=1)
    typer.echo(str(count_rows(text, columns)))


if __name__ == "__main__":
    app()
