"""Pydantic models shared across the reformatting pipeline.

Regions are computed once per document and never mutated afterwards, so the
models are frozen.  CleaningRules carries the switches for the content-specific
prose heuristics, which are kept out of the core pipeline behaviour.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class RegionKind(str, Enum):
    """Whether a region is rendered as a table or cleaned as prose."""

    TABLE = "table"
    PROSE = "prose"


class Region(BaseModel):
    """A half-open range ``[start, end)`` of line indices with a single kind."""

    model_config = ConfigDict(frozen=True)

    kind: RegionKind
    start: int
    end: int

    @model_validator(mode="after")
    def validate_bounds(self) -> "Region":
        """Regions are never empty and never start before line 0."""
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid region bounds [{self.start}, {self.end})")
        return self

    @property
    def is_table(self) -> bool:
        return self.kind is RegionKind.TABLE

    def __len__(self) -> int:
        return self.end - self.start


class CleaningRules(BaseModel):
    """Independently switchable prose heuristics.

    Both rules were written for artifacts seen in real converter output and
    can damage legitimate text, so callers may turn them off:

    - ``fix_place_names``: normalise ``word,word`` spacing to ``word, word``.
    - ``strip_footnote_numbers``: drop 1-2 digit numbers sitting between
      whitespace and a capitalised word (stray footnote markers).
    """

    model_config = ConfigDict(frozen=True)

    fix_place_names: bool = True
    strip_footnote_numbers: bool = True
