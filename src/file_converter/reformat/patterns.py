"""Compiled regex patterns for cleaning converter-emitted Markdown.

These patterns recognise the artifacts marker and similar converters leave
behind: HTML line breaks inside cells, inline emphasis tags, stray footnote
digits, and pre-existing table separator rows.  Used by cells.py, prose.py,
classifiers.py and pipeline.py.
"""

import re

# ─── Inline HTML Patterns ─────────────────────────────────────────────────────

# <br>, <br/>, <br />
LINE_BREAK_RE = re.compile(r"<br\s*/?>")

# Underlined text keeps its content: "<u>Title</u>" -> "Title"
UNDERLINE_RE = re.compile(r"<u>([^<>]*)</u>")

# Emphasis / strong tags are dropped, content between them is untouched
EMPHASIS_TAG_RE = re.compile(r"</?em>")
STRONG_TAG_RE = re.compile(r"</?strong>")


# ─── Table Patterns ───────────────────────────────────────────────────────────

PIPE = "|"

# Place name split by a line break inside one cell, e.g. "Paris,<br>France"
PLACE_NAME_BREAK_RE = re.compile(r"(?<=[A-Za-z\s]),\s*<br>\s*(?=[A-Za-z\s])")

# Any whitespace around a pipe is normalised to exactly one space each side
PIPE_SPACING_RE = re.compile(r"\s*\|\s*")

# Existing header separator such as "|----|:---:|" (dashes, colons, spaces, pipes only)
SEPARATOR_LINE_RE = re.compile(r"^\s*\|[\s\-:|]*\|\s*$")


# ─── Prose Patterns ───────────────────────────────────────────────────────────

# "word,word" / "word,   word" -> "word, word"; matches the comma alone so each comma is fixed
PLACE_NAME_RE = re.compile(r"(?<=[A-Za-z\s]),\s*(?=[A-Za-z\s])")

# One or two ASCII digits between whitespace and a capitalised word (stray footnote marker)
FOOTNOTE_NUMBER_RE = re.compile(r"(?<=\s)[0-9]{1,2}(?=\s+[A-Z][a-z])")

WHITESPACE_RUN_RE = re.compile(r"\s+")


# ─── Whole-Document Patterns ──────────────────────────────────────────────────

# Three or more line breaks, possibly with whitespace-only lines between them
EXCESS_BLANK_LINES_RE = re.compile(r"\n\s*\n\s*\n+")

# A line holding only heading markers, removed together with its line break
EMPTY_HEADING_RE = re.compile(r"^#+[ \t]*(?:\n|$)", re.MULTILINE)

# URL halves joined by a line-break marker
BROKEN_URL_RE = re.compile(r"(https?://[^\s<>]+)<br\s*/?>([^\s<>]+)")
