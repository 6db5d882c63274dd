"""Keyword-based categorization of converted Markdown documents."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from file_converter.config import CONTENT_SAMPLE_CHARS

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"

# Checked in order; on a tie the earlier category wins
CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Research": ("analysis", "research", "study", "investigation", "findings", "methodology"),
    "Planning": ("plan", "strategy", "roadmap", "timeline", "goals", "objectives", "discussion"),
    "Documentation": ("documentation", "guide", "manual", "instructions", "tutorial", "reference"),
    "Technical": ("technical", "implementation", "architecture", "design", "specification", "api"),
    "Business": ("business", "market", "competitive", "revenue", "commercial", "strategy"),
}

# Keyword hits needed for full confidence
CONFIDENT_HITS = 3


class ContentAnalysis(BaseModel):
    """Category assigned to one document, with the keywords that were found."""

    file_path: str
    category: str = DEFAULT_CATEGORY
    confidence: float = 0.0
    keywords: list[str] = Field(default_factory=list)


def categorize_text(text: str) -> tuple[str, float, list[str]]:
    """Score *text* against every category and return (category, confidence, keywords found)."""
    sample = text[:CONTENT_SAMPLE_CHARS].lower()
    best_category = DEFAULT_CATEGORY
    best_score = 0
    found_keywords: list[str] = []

    for category, keywords in CATEGORY_KEYWORDS.items():
        hits = [keyword for keyword in keywords if keyword in sample]
        found_keywords.extend(hits)
        if len(hits) > best_score:
            best_score = len(hits)
            best_category = category

    return best_category, min(best_score / CONFIDENT_HITS, 1.0), found_keywords


def analyze_markdown_content(md_path: str | Path) -> ContentAnalysis:
    """Categorize one Markdown file; unreadable files come back as General with zero confidence."""
    try:
        text = Path(md_path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s: %s", md_path, exc)
        return ContentAnalysis(file_path=str(md_path))

    category, confidence, keywords = categorize_text(text)
    return ContentAnalysis(file_path=str(md_path), category=category, confidence=confidence, keywords=keywords)


def group_by_category(analyses: list[ContentAnalysis]) -> dict[str, list[str]]:
    """Map each category to the file paths assigned to it, preserving input order."""
    grouped: dict[str, list[str]] = {}
    for analysis in analyses:
        grouped.setdefault(analysis.category, []).append(analysis.file_path)
    return grouped
