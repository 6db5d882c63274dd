"""Per-column width planning for a table region.

Widths follow a three-tier policy on the longest cell of each column:

- short columns (max <= 25) keep their exact width, never below 8;
- medium columns (25 < max <= 60) shrink toward the average, never below 15;
- long columns (max > 60) are capped at 50 and never go below 30.

Only non-empty cells are measured.  All lengths go through ``cell_width`` so
the planner and the renderer always agree on what "width" means.
"""

import math
from collections.abc import Sequence

MIN_WIDTH = 8
SHORT_MAX = 25
MEDIUM_MAX = 60
MEDIUM_MIN_WIDTH = 15
MEDIUM_SHRINK = 0.8
MEDIUM_SLACK = 10
LONG_MIN_WIDTH = 30
LONG_MAX_WIDTH = 50


def cell_width(text: str) -> int:
    """Display width of *text*, counted in code points.

    Wide (CJK) characters and combining sequences are not special-cased.
    """
    return len(text)


def column_width(lengths: Sequence[int]) -> int:
    """Return the target width for a column whose non-empty cells have *lengths*."""
    if not lengths:
        return MIN_WIDTH

    avg = sum(lengths) / len(lengths)
    longest = max(lengths)

    if longest <= SHORT_MAX:
        return max(longest, MIN_WIDTH)
    if longest <= MEDIUM_MAX:
        return max(math.floor(min(longest * MEDIUM_SHRINK, avg + MEDIUM_SLACK)), MEDIUM_MIN_WIDTH)
    return math.floor(min(LONG_MAX_WIDTH, max(LONG_MIN_WIDTH, avg)))


def plan_column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Return one width per column, where the column count is the longest row's length."""
    max_columns = max((len(row) for row in rows), default=0)
    plan: list[int] = []
    for col in range(max_columns):
        # Rows shorter than this column, and empty cells, contribute nothing
        lengths = [cell_width(row[col]) for row in rows if col < len(row) and row[col]]
        plan.append(column_width(lengths))
    return plan
