"""Partition a document's lines into ordered table and prose regions.

A single forward scan with two states (prose, table) opens a table region on
the first table line and closes it on the first non-table line after it.  The
untouched stretches between tables become prose regions, so the result covers
every line index exactly once and can be rendered without further bookkeeping.
"""

import logging
from collections.abc import Callable, Sequence

from file_converter.reformat.classifiers import is_table_line
from file_converter.reformat.schema import Region, RegionKind

logger = logging.getLogger(__name__)


def find_table_spans(lines: Sequence[str], predicate: Callable[[str], bool] = is_table_line) -> list[tuple[int, int]]:
    """Return half-open ``(start, end)`` spans of maximal runs of table lines."""
    spans: list[tuple[int, int]] = []
    table_start: int | None = None  # set while inside a table run

    for i, line in enumerate(lines):
        if predicate(line):
            if table_start is None:
                table_start = i
        elif table_start is not None:
            spans.append((table_start, i))
            table_start = None

    # Table running to the end of the document
    if table_start is not None:
        spans.append((table_start, len(lines)))

    return spans


def segment_regions(lines: Sequence[str], predicate: Callable[[str], bool] = is_table_line) -> list[Region]:
    """Return contiguous, non-overlapping regions that cover ``[0, len(lines))``.

    *predicate* decides table membership per line; it defaults to the
    two-pipe heuristic and can be swapped for a stricter classifier.
    """
    regions: list[Region] = []
    cursor = 0

    for start, end in find_table_spans(lines, predicate):
        # Prose gap before this table
        if start > cursor:
            regions.append(Region(kind=RegionKind.PROSE, start=cursor, end=start))
        regions.append(Region(kind=RegionKind.TABLE, start=start, end=end))
        cursor = end

    if cursor < len(lines):
        regions.append(Region(kind=RegionKind.PROSE, start=cursor, end=len(lines)))

    logger.debug(
        "Segmented %d lines into %d regions (%d tables)",
        len(lines),
        len(regions),
        sum(1 for region in regions if region.is_table),
    )
    return regions
