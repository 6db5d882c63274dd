"""Conservative table-line cleaning and cell parsing.

Table lines get a much lighter cleanup than prose: markup is removed and
whitespace normalised, but nothing may merge or split cells.  Parsing then
splits on pipes, dropping only the empty pieces created by the outer border.
"""

from file_converter.reformat.patterns import (
    EMPHASIS_TAG_RE,
    LINE_BREAK_RE,
    PIPE,
    PIPE_SPACING_RE,
    PLACE_NAME_BREAK_RE,
    STRONG_TAG_RE,
    UNDERLINE_RE,
    WHITESPACE_RUN_RE,
)


def strip_inline_markup(line: str) -> str:
    """Replace line breaks with spaces and unwrap underline / emphasis / strong tags."""
    line = LINE_BREAK_RE.sub(" ", line)
    line = UNDERLINE_RE.sub(r"\1", line)
    line = EMPHASIS_TAG_RE.sub("", line)
    return STRONG_TAG_RE.sub("", line)


def clean_table_line(line: str) -> str:
    """Strip inline markup from a table line while preserving its cell boundaries."""
    # Place name wrapped inside one cell: keep both halves in the same cell
    line = PLACE_NAME_BREAK_RE.sub(", ", line)
    line = strip_inline_markup(line)
    line = WHITESPACE_RUN_RE.sub(" ", line)
    line = PIPE_SPACING_RE.sub(" | ", line)
    return line.strip()


def parse_cells(line: str) -> list[str]:
    """Split a table line into trimmed cells.

    Empty pieces at the very start and end come from the border pipes and are
    dropped; empty interior pieces are real empty cells and are kept.  A
    degenerate all-pipe line yields only empty cells, or none at all.
    """
    pieces = [piece.strip() for piece in line.split(PIPE)]
    last = len(pieces) - 1
    return [piece for i, piece in enumerate(pieces) if piece or 0 < i < last]
