"""Directory-level document organization around the converter.

Submodules:
  discovery  -- PDF / Markdown discovery and companion-file checks
  analysis   -- keyword-based content categorization
  structure  -- category folder creation
  workflow   -- conversion audits, batch conversion, full workflow
"""
