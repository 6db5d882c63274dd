"""Pydantic models for conversion options, results and engine availability."""

from typing import Literal

from pydantic import BaseModel, Field

from file_converter.config import DEFAULT_ENGINE

Engine = Literal["marker", "pymupdf4llm"]


class ConversionOptions(BaseModel):
    """Options accepted by convert_pdf_to_markdown.

    ``page_chunks``, ``write_images``, ``image_path``, ``table_strategy`` and
    ``extract_content`` only affect the pymupdf4llm engine; ``auto_clean``
    only affects marker, whose raw output carries HTML artifacts.
    """

    engine: Engine = DEFAULT_ENGINE  # type: ignore[assignment]
    page_chunks: bool = False
    write_images: bool = False
    image_path: str | None = None
    table_strategy: Literal["fast", "accurate"] = "accurate"
    extract_content: Literal["text", "figures", "both"] = "both"
    auto_clean: bool = True


class ConversionResult(BaseModel):
    """Outcome of one PDF conversion; failures carry ``error`` instead of raising."""

    success: bool
    markdown_content: str | None = None
    output_file: str | None = None
    page_count: int = 0
    char_count: int = 0
    images_extracted: int = 0
    processing_time: int = 0  # milliseconds
    memory_used: float = 0.0  # MB
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None


class DependencyStatus(BaseModel):
    """Availability of one conversion engine."""

    available: bool
    version: str | None = None
    error: str | None = None
