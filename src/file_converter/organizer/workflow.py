"""Conversion-status audits, batch conversion of missing PDFs, and the full workflow.

The full workflow runs four steps over one directory and reports counts per step:
  1. discover          -- find every PDF (recursive)
  2. check_conversions -- which PDFs lack a companion Markdown file
  3. convert_missing   -- convert those with marker + table-aware cleaning
  4. analyze           -- categorize every Markdown file (optional)

Usage:
  python -m file_converter.organizer.workflow <directory> [--no-analyze]
"""

import argparse
import json
import logging
from collections.abc import Sequence
from pathlib import Path

from tqdm import tqdm

from file_converter.conversion.converter import convert_pdf_to_markdown
from file_converter.conversion.schema import ConversionOptions
from file_converter.organizer.analysis import analyze_markdown_content, group_by_category
from file_converter.organizer.discovery import check_md_exists, companion_md_path, find_markdown_files, find_pdf_files

logger = logging.getLogger(__name__)


def check_conversions(directory: str | Path, pdf_files: Sequence[str | Path] | None = None) -> dict:
    """Report which PDFs already have a companion Markdown file."""
    pdfs = find_pdf_files(directory) if pdf_files is None else list(pdf_files)
    status = []
    for pdf_path in pdfs:
        has_markdown = check_md_exists(pdf_path)
        status.append({"pdf_path": str(pdf_path), "has_markdown": has_markdown, "needs_conversion": not has_markdown})

    return {
        "total_pdfs": len(status),
        "already_converted": sum(1 for s in status if s["has_markdown"]),
        "needs_conversion": sum(1 for s in status if s["needs_conversion"]),
        "conversion_status": status,
    }


def convert_pdf_to_md(pdf_path: str | Path) -> dict:
    """Convert one PDF next to itself with marker and auto-clean on."""
    md_path = companion_md_path(pdf_path)
    result = convert_pdf_to_markdown(pdf_path, str(md_path), ConversionOptions(engine="marker", auto_clean=True))
    if result.success:
        return {"success": True, "md_path": result.output_file or str(md_path)}
    return {"success": False, "error": result.error}


def convert_missing(
    directory: str | Path,
    pdf_files: Sequence[str | Path] | None = None,
    show_progress: bool = False,
) -> dict:
    """Convert every PDF that has no companion Markdown file yet."""
    pdfs = find_pdf_files(directory) if pdf_files is None else list(pdf_files)
    missing = [pdf_path for pdf_path in pdfs if not check_md_exists(pdf_path)]
    logger.info("%d of %d PDFs need conversion", len(missing), len(pdfs))

    conversions = []
    for pdf_path in tqdm(missing, desc="Converting PDFs", disable=not show_progress):
        conversions.append({"pdf_path": str(pdf_path), **convert_pdf_to_md(pdf_path)})

    successful = sum(1 for c in conversions if c["success"])
    return {
        "conversions_attempted": len(conversions),
        "successful_conversions": successful,
        "failed_conversions": len(conversions) - successful,
        "results": conversions,
    }


def run_full_workflow(directory: str | Path, analyze_content: bool = True, show_progress: bool = False) -> dict:
    """Discover, audit, convert and (optionally) categorize everything under *directory*."""
    workflow: list[dict] = []

    # ── 1. Discover PDFs ─────────────────────────────────────────────────
    pdf_files = find_pdf_files(directory)
    workflow.append({"step": "discover", "found_pdfs": len(pdf_files)})

    # ── 2. Check conversion status ───────────────────────────────────────
    status = check_conversions(directory, pdf_files)
    workflow.append({"step": "check_conversions", "needs_conversion": status["needs_conversion"]})

    # ── 3. Convert the missing ones ──────────────────────────────────────
    needing = [s["pdf_path"] for s in status["conversion_status"] if s["needs_conversion"]]
    conversions = convert_missing(directory, needing, show_progress=show_progress)
    workflow.append(
        {
            "step": "convert_missing",
            "conversions_attempted": conversions["conversions_attempted"],
            "successful": conversions["successful_conversions"],
        }
    )

    # ── 4. Categorize Markdown files ─────────────────────────────────────
    categorization: dict[str, list[str]] = {}
    if analyze_content:
        md_files = find_markdown_files(directory)
        categorization = group_by_category([analyze_markdown_content(md) for md in md_files])
        workflow.append({"step": "analyze_content", "analyzed_files": len(md_files), "categories": len(categorization)})

    logger.info("Workflow finished for %s: %s", directory, [step["step"] for step in workflow])
    return {
        "directory": str(directory),
        "workflow_steps": workflow,
        "categorization": categorization,
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description="Convert and categorize every PDF in a directory")
    parser.add_argument("directory", help="Directory to process")
    parser.add_argument("--no-analyze", action="store_true", help="Skip content categorization")
    args = parser.parse_args()

    report = run_full_workflow(args.directory, analyze_content=not args.no_analyze, show_progress=True)
    print(json.dumps(report, indent=2))
