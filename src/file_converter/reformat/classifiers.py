"""Line classification helpers for table detection.

Each function takes one line of Markdown and returns True/False.  The table
test is purely syntactic: prose containing two literal pipes is classified as
a table line, and a single-column table drawn with one border pipe is not.
Both outcomes are accepted behaviour.
"""

from file_converter.reformat.patterns import PIPE, SEPARATOR_LINE_RE


def is_table_line(line: str) -> bool:
    """Return True if the line contains at least two pipe characters."""
    return line.count(PIPE) >= 2


def is_separator_line(line: str) -> bool:
    """Return True for an existing header separator row like '|---|:--:|'."""
    return bool(SEPARATOR_LINE_RE.match(line))
