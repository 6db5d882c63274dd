"""Tool definitions for PDF conversion and Markdown cleanup.

Provides LangChain tools:
- convert_pdf: convert one PDF to Markdown (marker or pymupdf4llm)
- check_dependency: report (and optionally install) the conversion engines
- reformat_markdown: run the table-aware Markdown reformatter on raw text
- discover_pdfs / check_conversions / convert_missing: directory-level conversion
- analyze_content / organize_structure / full_workflow: categorization and organization

Every tool returns text.  Failures are reported as ``Error: ...`` strings so
the calling agent can read them instead of receiving an exception.
"""

import json
import logging
from typing import Literal

from langchain_core.tools import tool

from file_converter.config import DEFAULT_ENGINE
from file_converter.conversion.converter import convert_pdf_to_markdown, select_engine
from file_converter.conversion.engines import check_marker, check_pymupdf4llm, install_pymupdf4llm
from file_converter.conversion.schema import ConversionOptions, ConversionResult, DependencyStatus
from file_converter.organizer.analysis import analyze_markdown_content, group_by_category
from file_converter.organizer.discovery import find_markdown_files, find_pdf_files
from file_converter.organizer.structure import organize_structure as create_category_folders
from file_converter.organizer.workflow import check_conversions as audit_conversions
from file_converter.organizer.workflow import convert_missing as convert_missing_pdfs
from file_converter.organizer.workflow import run_full_workflow
from file_converter.reformat import reformat

logger = logging.getLogger(__name__)

MARKDOWN_CONTENT_HEADER = "\n--- MARKDOWN CONTENT ---\n"


def _to_json(payload: dict) -> str:
    return json.dumps(payload, indent=2)


# ---------------------------------------------------------------------------
# Summary formatting
# ---------------------------------------------------------------------------


def format_conversion_summary(result: ConversionResult, engine: str) -> str:
    """Build the human-readable summary returned by convert_pdf."""
    lines = [
        f"PDF Conversion Successful ({engine})",
        f"Pages: {result.page_count}",
        f"Characters: {result.char_count:,}",
        f"Images extracted: {result.images_extracted}",
        f"Processing time: {result.processing_time}ms",
    ]
    if result.memory_used > 0:
        lines.append(f"Memory used: {result.memory_used:.2f}MB")
    if result.warnings:
        lines.append(f"Warnings: {'; '.join(result.warnings)}")
    if result.output_file:
        lines.append(f"Output file: {result.output_file}")

    summary = "\n".join(lines)
    # Content is inlined only when it was not written to disk
    if not result.output_file and result.markdown_content:
        summary += "\n" + MARKDOWN_CONTENT_HEADER + result.markdown_content
    return summary


def format_dependency_status(name: str, status: DependencyStatus, recommended: bool = False) -> str:
    """One status line per engine, e.g. 'marker available (available) - recommended'."""
    if status.available:
        suffix = " - recommended" if recommended else ""
        return f"{name} available ({status.version}){suffix}"
    return f"{name} not available: {status.error}"


# ---------------------------------------------------------------------------
# Tool: convert_pdf
# ---------------------------------------------------------------------------


@tool(parse_docstring=True)
def convert_pdf(
    pdf_path: str,
    output_path: str = "",
    engine: Literal["marker", "pymupdf4llm"] = DEFAULT_ENGINE,  # type: ignore[assignment]
    page_chunks: bool = False,
    write_images: bool = False,
    image_path: str = "",
    table_strategy: Literal["fast", "accurate"] = "accurate",
    extract_content: Literal["text", "figures", "both"] = "both",
    auto_clean: bool = True,
) -> str:
    """Convert a PDF file to Markdown using marker (recommended) or pymupdf4llm.

    marker gives better results on complex documents with tables; its output is
    automatically cleaned by the table-aware reformatter. Falls back to
    pymupdf4llm when marker is not installed. Returns conversion statistics,
    followed by the Markdown itself when no output_path is given.

    Args:
        pdf_path: Path to the PDF file to convert.
        output_path: Optional path to write the Markdown to. If empty, the content is returned.
        engine: Conversion engine, "marker" or "pymupdf4llm".
        page_chunks: Process page by page for memory efficiency (pymupdf4llm only).
        write_images: Extract embedded images to files (pymupdf4llm only).
        image_path: Directory for extracted images (requires write_images).
        table_strategy: Table extraction strategy, "fast" or "accurate" (pymupdf4llm only).
        extract_content: Content to extract, "text", "figures" or "both" (pymupdf4llm only).
        auto_clean: Clean marker formatting artifacts with the table-aware reformatter.
    """
    try:
        actual_engine = select_engine(engine)
    except RuntimeError as exc:
        logger.warning("convert_pdf: %s", exc)
        return f"Error: {exc}"

    options = ConversionOptions(
        engine=actual_engine,
        page_chunks=page_chunks,
        write_images=write_images,
        image_path=image_path or None,
        table_strategy=table_strategy,
        extract_content=extract_content,
        auto_clean=auto_clean,
    )
    logger.info("convert_pdf: %s (engine=%s)", pdf_path, actual_engine)
    result = convert_pdf_to_markdown(pdf_path, output_path or None, options)
    if not result.success:
        return f"Error: {result.error or 'Conversion failed'}"
    return format_conversion_summary(result, actual_engine)


# ---------------------------------------------------------------------------
# Tool: check_dependency
# ---------------------------------------------------------------------------


@tool(parse_docstring=True)
def check_dependency(install_if_missing: bool = False) -> str:
    """Check whether marker and pymupdf4llm are available for PDF conversion.

    Use this before attempting conversions. Optionally installs pymupdf4llm
    with pip when it is missing.

    Args:
        install_if_missing: Attempt to install pymupdf4llm if it is not found.
    """
    marker = check_marker()
    pymupdf = check_pymupdf4llm()

    if not pymupdf.available and install_if_missing:
        pymupdf = install_pymupdf4llm()
        if not pymupdf.available:
            return f"Error: failed to install pymupdf4llm: {pymupdf.error}"
        logger.info("check_dependency: installed pymupdf4llm %s", pymupdf.version)

    return "\n".join(
        [
            format_dependency_status("marker", marker, recommended=True),
            format_dependency_status("pymupdf4llm", pymupdf),
        ]
    )


# ---------------------------------------------------------------------------
# Tool: reformat_markdown
# ---------------------------------------------------------------------------


@tool(parse_docstring=True)
def reformat_markdown(markdown_text: str, auto_clean: bool = True) -> str:
    """Clean raw converter Markdown and re-align its tables.

    Removes inline HTML artifacts from prose, and rewrites every pipe table
    with padded columns, a fresh header separator and truncated long cells.

    Args:
        markdown_text: Raw Markdown text produced by a PDF converter.
        auto_clean: If false, the text is returned unchanged.
    """
    return reformat(markdown_text, auto_clean=auto_clean)


# ---------------------------------------------------------------------------
# Tools: directory-level conversion
# ---------------------------------------------------------------------------


@tool(parse_docstring=True)
def discover_pdfs(directory_path: str, recursive: bool = True) -> str:
    """Find all PDF files in a directory tree.

    Args:
        directory_path: Directory to scan for PDF files.
        recursive: Search subdirectories recursively.
    """
    pdf_files = [str(path) for path in find_pdf_files(directory_path, recursive)]
    logger.info("discover_pdfs: found %d PDFs in %s", len(pdf_files), directory_path)
    return _to_json(
        {
            "found_pdfs": len(pdf_files),
            "pdf_files": pdf_files,
            "scanned_directory": directory_path,
            "recursive_scan": recursive,
        }
    )


@tool(parse_docstring=True)
def check_conversions(directory_path: str, pdf_files: list[str] | None = None) -> str:
    """Report which PDFs already have a companion Markdown file.

    Args:
        directory_path: Directory containing PDF files.
        pdf_files: Specific PDF files to check. If omitted, all PDFs in the directory are checked.
    """
    return _to_json(audit_conversions(directory_path, pdf_files))


@tool(parse_docstring=True)
def convert_missing(directory_path: str, pdf_files: list[str] | None = None) -> str:
    """Convert only the PDFs that do not have a companion Markdown file yet.

    Already-converted documents are skipped. Each PDF is converted with marker
    and cleaned, and written next to the PDF.

    Args:
        directory_path: Directory containing PDFs to convert.
        pdf_files: Specific PDF files to convert. If omitted, all missing conversions are done.
    """
    return _to_json(convert_missing_pdfs(directory_path, pdf_files))


# ---------------------------------------------------------------------------
# Tools: categorization and organization
# ---------------------------------------------------------------------------


@tool(parse_docstring=True)
def analyze_content(directory_path: str, md_files: list[str] | None = None) -> str:
    """Categorize Markdown files by keyword analysis of their opening text.

    Categories are Research, Planning, Documentation, Technical, Business, or
    General, each with a confidence score and the keywords found.

    Args:
        directory_path: Directory containing Markdown files.
        md_files: Specific Markdown files to analyze. If omitted, all Markdown files are analyzed.
    """
    paths = md_files if md_files is not None else [str(path) for path in find_markdown_files(directory_path)]
    analyses = [analyze_markdown_content(path) for path in paths]
    return _to_json(
        {
            "total_files": len(analyses),
            "categorized_breakdown": group_by_category(analyses),
            "detailed_analysis": [analysis.model_dump() for analysis in analyses],
        }
    )


@tool(parse_docstring=True)
def organize_structure(directory_path: str, categories: dict[str, list[str]], create_pdf_md_subfolders: bool = True) -> str:
    """Create one folder per document category, optionally with PDFs/ and MDs/ subfolders.

    Args:
        directory_path: Directory to organize.
        categories: Category names mapped to the files that belong to them.
        create_pdf_md_subfolders: Create PDFs and MDs subfolders in each category.
    """
    try:
        results = create_category_folders(directory_path, categories, create_pdf_md_subfolders)
    except OSError as exc:
        logger.warning("organize_structure: %s", exc)
        return f"Error: could not create category folders: {exc}"
    return _to_json(
        {
            "categories_created": len(results),
            "organization_results": [result.model_dump() for result in results],
        }
    )


@tool(parse_docstring=True)
def full_workflow(directory_path: str, analyze_content: bool = True) -> str:  # pylint: disable=redefined-outer-name
    """Run the end-to-end pipeline: discover PDFs, check and convert missing ones, categorize.

    Args:
        directory_path: Directory to process.
        analyze_content: Analyze Markdown content for categorization.
    """
    return _to_json(run_full_workflow(directory_path, analyze_content=analyze_content))


TOOLS = [
    convert_pdf,
    check_dependency,
    reformat_markdown,
    discover_pdfs,
    check_conversions,
    convert_missing,
    analyze_content,
    organize_structure,
    full_workflow,
]
