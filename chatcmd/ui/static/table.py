#!/usr/bin/env python3
# chatcmd/ui/static/table.py
from __future__ import annotations

from typing import List, Optional, Sequence

from chatcmd.ui.utils.ansi import strip_ansi


def _visible_len(cell: str) -> int:
    return len(strip_ansi(cell))


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
) -> str:
    """Return a borderless, column-aligned table (ANSI-safe widths)."""
    grid: List[List[str]] = [[str(cell) for cell in row] for row in rows]
    if headers is not None:
        grid.insert(0, [str(h) for h in headers])
    if not grid:
        return ""

    column_count = max(len(row) for row in grid)
    widths = [
        max((_visible_len(row[i]) for row in grid if i < len(row)), default=0)
        for i in range(column_count)
    ]
    gap = " " * (padding * 2)

    lines: List[str] = []
    for row_index, row in enumerate(grid):
        cells = [
            cell + " " * (widths[i] - _visible_len(cell))
            for i, cell in enumerate(row)
        ]
        lines.append(gap.join(cells).rstrip())
        if headers is not None and row_index == 0:
            lines.append(gap.join("-" * w for w in widths))
    return "\n".join(lines)
