"""Render a table region as an aligned Markdown table.

Every output row is rectangular: each cell is padded (or truncated with an
ellipsis) to exactly its column's planned width.  The header separator is
always synthesised here; separator rows found in the input are dropped before
parsing so they never come back as data.
"""

import logging
from collections.abc import Sequence

from file_converter.reformat.cells import parse_cells
from file_converter.reformat.classifiers import is_separator_line
from file_converter.reformat.widths import cell_width, plan_column_widths

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def _pad(text: str, width: int) -> str:
    return text + " " * (width - cell_width(text))


def fit_cell(cell: str, width: int) -> str:
    """Return *cell* padded to *width*, or cut at a word boundary and ended with '...'.

    Whole words are kept while they fit in ``width - 3`` characters (counting
    the joining spaces).  If not even the first word fits, the cell is cut
    mid-word instead.
    """
    if cell_width(cell) <= width:
        return _pad(cell, width)

    budget = width - len(ELLIPSIS)
    kept = ""
    for word in cell.split(" "):
        candidate = f"{kept} {word}" if kept else word
        if cell_width(candidate) > budget:
            break
        kept = candidate

    if not kept:
        kept = cell[:budget]
    return _pad(kept + ELLIPSIS, width)


def render_row(cells: Sequence[str]) -> str:
    """Join already-fitted cells into a bordered Markdown row."""
    return "| " + " | ".join(cells) + " |"


def render_rows(rows: Sequence[Sequence[str]], widths: Sequence[int]) -> list[str]:
    """Render *rows* against a column plan; row 0 is the header and gets a separator after it."""
    rendered: list[str] = []
    for row_index, row in enumerate(rows):
        fitted = [fit_cell(row[col] if col < len(row) else "", width) for col, width in enumerate(widths)]
        rendered.append(render_row(fitted))
        if row_index == 0:
            rendered.append(render_row(["-" * width for width in widths]))
    return rendered


def collect_rows(lines: Sequence[str]) -> list[list[str]]:
    """Parse cleaned table lines into rows, skipping blanks, separators and empty rows."""
    rows: list[list[str]] = []
    for line in lines:
        if not line.strip() or is_separator_line(line):
            continue
        cells = parse_cells(line)
        if cells:
            rows.append(cells)
    return rows


def format_table_region(lines: Sequence[str]) -> list[str]:
    """Reformat the cleaned lines of one table region.

    A region of fewer than two lines, or one with no data rows left after
    dropping separators, is returned unchanged.
    """
    if len(lines) < 2:
        return list(lines)

    rows = collect_rows(lines)
    if not rows:
        return list(lines)

    widths = plan_column_widths(rows)
    logger.debug("Rendering table: %d rows, column widths %s", len(rows), widths)
    return render_rows(rows, widths)
