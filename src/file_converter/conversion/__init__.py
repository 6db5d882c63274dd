"""PDF conversion engines and the conversion entry point.

Submodules:
  schema     -- ConversionOptions / ConversionResult / DependencyStatus models
  engines    -- marker and pymupdf4llm availability checks, pymupdf4llm install
  converter  -- convert_pdf_to_markdown and the engine-specific converters
"""
