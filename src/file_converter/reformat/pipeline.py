"""Main reformatting entry point and whole-document cleanups.

Turns raw Markdown from a PDF converter into clean, uniformly formatted
Markdown:

  1. split the text into lines and segment them into table / prose regions
  2. prose regions: every line goes through the prose cleaner
  3. table regions: lines are cleaned conservatively, parsed into rows,
     planned, and re-rendered as an aligned table
  4. the regions are joined in their original order and whole-document
     cleanups are applied (blank-line runs, empty headings, broken URLs)

The pipeline is a pure function of its input: no I/O, no shared state.

Usage:
  python -m file_converter.reformat.pipeline raw.md > clean.md
"""

import logging
import sys
from collections.abc import Callable

from file_converter.reformat.cells import clean_table_line
from file_converter.reformat.classifiers import is_table_line
from file_converter.reformat.patterns import BROKEN_URL_RE, EMPTY_HEADING_RE, EXCESS_BLANK_LINES_RE
from file_converter.reformat.prose import DEFAULT_RULES, clean_prose_line
from file_converter.reformat.rendering import format_table_region
from file_converter.reformat.schema import CleaningRules, Region
from file_converter.reformat.segmentation import segment_regions

logger = logging.getLogger(__name__)


class InvalidInputKindError(TypeError):
    """Raised when the reformatter is handed something other than a str."""


# ─── Whole-Document Cleanups ─────────────────────────────────────────────────


def apply_global_cleanups(text: str) -> str:
    """Drop heading-only lines, collapse blank-line runs, and rejoin URLs split by '<br>'."""
    text = EMPTY_HEADING_RE.sub("", text)
    text = EXCESS_BLANK_LINES_RE.sub("\n\n", text)
    return BROKEN_URL_RE.sub(r"\1\2", text)


# ─── Region Assembly ──────────────────────────────────────────────────────────


def assemble(lines: list[str], regions: list[Region], rules: CleaningRules = DEFAULT_RULES) -> list[str]:
    """Render every region in order and return the output lines."""
    output: list[str] = []
    for region in regions:
        region_lines = lines[region.start : region.end]
        if region.is_table:
            cleaned = [clean_table_line(line) for line in region_lines]
            output.extend(format_table_region(cleaned))
        else:
            output.extend(clean_prose_line(line, rules) for line in region_lines)
    return output


def reformat(
    markdown_text: str,
    auto_clean: bool = True,
    rules: CleaningRules | None = None,
    table_predicate: Callable[[str], bool] = is_table_line,
) -> str:
    """Return a cleaned, table-aligned version of *markdown_text*.

    With ``auto_clean=False`` the text is returned untouched.  Any non-str
    input (including bytes) raises InvalidInputKindError; nothing is coerced.
    """
    if not isinstance(markdown_text, str):
        raise InvalidInputKindError(f"reformat() expects str, got {type(markdown_text).__name__}")
    if not auto_clean:
        return markdown_text

    lines = markdown_text.split("\n")
    regions = segment_regions(lines, table_predicate)
    output = assemble(lines, regions, rules or DEFAULT_RULES)

    result = apply_global_cleanups("\n".join(output)).strip()
    logger.debug(
        "Reformatted %d lines (%d table regions) into %d characters",
        len(lines),
        sum(1 for region in regions if region.is_table),
        len(result),
    )
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    if len(sys.argv) != 2:
        sys.exit("usage: python -m file_converter.reformat.pipeline <markdown-file>")
    with open(sys.argv[1], "r", encoding="utf-8") as fopen:
        raw_text = fopen.read()
    sys.stdout.write(reformat(raw_text) + "\n")
