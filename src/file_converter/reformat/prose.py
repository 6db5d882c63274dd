"""Prose line cleaning.

Applied to every line outside a table region, in this order:
  1. line-break markers become spaces
  2. inline <u>/<em>/<strong> markup is stripped, text kept
  3. place-name comma spacing is normalised        (CleaningRules.fix_place_names)
  4. stray 1-2 digit footnote markers are removed   (CleaningRules.strip_footnote_numbers)
  5. whitespace is collapsed and the line trimmed

Rules 3 and 4 target artifacts of specific documents and may alter legitimate
text (e.g. "Chapter 12 Results" loses its "12"), so each can be switched off.
"""

from file_converter.reformat.cells import strip_inline_markup
from file_converter.reformat.patterns import FOOTNOTE_NUMBER_RE, PLACE_NAME_RE, WHITESPACE_RUN_RE
from file_converter.reformat.schema import CleaningRules

DEFAULT_RULES = CleaningRules()


def fix_place_names(line: str) -> str:
    """Normalise 'Paris,France' and 'Paris,   France' style spacing to 'Paris, France'."""
    return PLACE_NAME_RE.sub(", ", line)


def strip_footnote_numbers(line: str) -> str:
    """Drop 1-2 digit numbers sitting between whitespace and a capitalised word."""
    return FOOTNOTE_NUMBER_RE.sub("", line)


def clean_prose_line(line: str, rules: CleaningRules = DEFAULT_RULES) -> str:
    """Return a cleaned, whitespace-normalised version of a non-table line."""
    line = strip_inline_markup(line)
    if rules.fix_place_names:
        line = fix_place_names(line)
    if rules.strip_footnote_numbers:
        line = strip_footnote_numbers(line)
    line = WHITESPACE_RUN_RE.sub(" ", line)
    return line.strip()
