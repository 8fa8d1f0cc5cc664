"""Box-drawing table for matched processes.

    ┌─────┬──────┬────────┬────────────────┐
    │ Pid │ Name │ Memory │ Virtual memory │
    ├─────┼──────┼────────┼────────────────┤
    └─────┴──────┴────────┴────────────────┘
"""

from collections.abc import Sequence

from rich.cells import cell_len

from memusage.models import MatchedRow

PADDING = 1  # On each side of a cell
LABELS = ("Pid", "Name", "Memory", "Virtual memory")

HORIZONTAL = "─"
VERTICAL = "│"

# (left, junction, right) for each horizontal rule
TOP = ("┌", "┬", "┐")
MIDDLE = ("├", "┼", "┤")
BOTTOM = ("└", "┴", "┘")


def _cells(row: MatchedRow) -> tuple[str, str, str, str]:
    return (row.pid, row.name, row.memory, row.virtual_memory)


def column_widths(rows: Sequence[MatchedRow]) -> tuple[int, ...]:
    """Compute the width of each column, padding included."""
    widths = [cell_len(label) for label in LABELS]
    for row in rows:
        for i, cell in enumerate(_cells(row)):
            widths[i] = max(widths[i], cell_len(cell))
    return tuple(width + PADDING * 2 for width in widths)


def _center(text: str, width: int) -> str:
    # Odd leftover goes to the right
    space = width - cell_len(text)
    left = space // 2
    return " " * left + text + " " * (space - left)


def _rule(glyphs: tuple[str, str, str], widths: Sequence[int]) -> str:
    left, junction, right = glyphs
    return left + junction.join(HORIZONTAL * width for width in widths) + right


def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
    inner = VERTICAL.join(_center(cell, width) for cell, width in zip(cells, widths))
    return VERTICAL + inner + VERTICAL


def render(rows: Sequence[MatchedRow]) -> list[str]:
    """
    Render rows as table lines.

    The frame (top border, header, separator, bottom border) is always
    present, so an empty row list still yields four lines.
    """
    widths = column_widths(rows)

    lines = [
        _rule(TOP, widths),
        _line(LABELS, widths),
        _rule(MIDDLE, widths),
    ]
    lines.extend(_line(_cells(row), widths) for row in rows)
    lines.append(_rule(BOTTOM, widths))
    return lines


def render_text(rows: Sequence[MatchedRow]) -> str:
    """Render rows as a single newline-joined block."""
    return "\n".join(render(rows))
