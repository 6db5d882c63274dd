"""PDF and Markdown discovery, and companion-Markdown checks.

A PDF counts as converted when a Markdown file sits next to it under one of
the names the converters produce: the plain stem, the stem with whitespace
runs replaced by underscores, or the stem with every non-alphanumeric
character replaced by an underscore (the name convert_missing writes).
"""

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def _find_files(directory: Path, suffix: str, recursive: bool) -> list[Path]:
    """Walk *directory* collecting files with *suffix* (case-insensitive)."""
    found: list[Path] = []

    def _on_error(exc: OSError) -> None:
        logger.error("Error scanning directory %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(directory, onerror=_on_error):
        found.extend(Path(dirpath) / name for name in filenames if name.lower().endswith(suffix))
        if not recursive:
            dirnames.clear()
    return sorted(found)


def find_pdf_files(directory: str | Path, recursive: bool = True) -> list[Path]:
    """Return every PDF under *directory*, sorted."""
    return _find_files(Path(directory).expanduser(), ".pdf", recursive)


def find_markdown_files(directory: str | Path) -> list[Path]:
    """Return every Markdown file under *directory* (recursive), sorted."""
    return _find_files(Path(directory).expanduser(), ".md", recursive=True)


def candidate_md_paths(pdf_path: str | Path) -> list[Path]:
    """Return the companion Markdown names checked for *pdf_path*, in order."""
    pdf_path = Path(pdf_path)
    stem = pdf_path.stem
    return [
        pdf_path.with_name(f"{stem}.md"),
        pdf_path.with_name(f"{_WHITESPACE_RUN_RE.sub('_', stem)}.md"),
        pdf_path.with_name(f"{_NON_ALNUM_RE.sub('_', stem)}.md"),
    ]


def companion_md_path(pdf_path: str | Path) -> Path:
    """Canonical output path for a converted PDF (non-alphanumerics become '_')."""
    return candidate_md_paths(pdf_path)[-1]


def check_md_exists(pdf_path: str | Path) -> bool:
    """Return True if any companion Markdown file exists next to *pdf_path*."""
    return any(path.is_file() for path in candidate_md_paths(pdf_path))
