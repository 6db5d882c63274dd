"""Table-aware Markdown reformatting of PDF-converter output.

Submodules:
  patterns        -- compiled regex patterns shared by the cleaners
  schema          -- Region / CleaningRules Pydantic models
  classifiers     -- table-line and separator-line predicates
  segmentation    -- partition a document into table and prose regions
  cells           -- conservative table-line cleaning and cell parsing
  widths          -- per-column width planning
  rendering       -- aligned Markdown table rendering with truncation
  prose           -- prose line cleaning rules
  pipeline        -- reformat() entry point and whole-document cleanups
"""

from file_converter.reformat.pipeline import InvalidInputKindError, reformat

__all__ = ["InvalidInputKindError", "reformat"]
