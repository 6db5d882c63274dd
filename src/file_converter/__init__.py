"""PDF to Markdown conversion tools with a table-aware Markdown reformatter.

Subpackages:
  reformat    -- line classification, table regions, cell parsing, width planning, rendering
  conversion  -- marker / pymupdf4llm engines and the conversion entry point
  organizer   -- PDF discovery, content categorization, folder organization, workflows
"""
