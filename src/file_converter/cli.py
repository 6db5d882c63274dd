"""Command line for local conversion and cleanup.

Usage:
    file-converter reformat raw.md [-o clean.md] [--keep-footnote-numbers] [--keep-place-names]
    file-converter convert paper.pdf [-o paper.md] [--engine pymupdf4llm] [--no-clean]
    file-converter workflow ./papers [--no-analyze]
    file-converter check
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from file_converter.config import DEFAULT_ENGINE, ENGINES
from file_converter.conversion.converter import convert_pdf_to_markdown, select_engine
from file_converter.conversion.engines import check_marker, check_pymupdf4llm
from file_converter.conversion.schema import ConversionOptions
from file_converter.organizer.workflow import run_full_workflow
from file_converter.reformat import reformat
from file_converter.reformat.schema import CleaningRules
from file_converter.tools import format_dependency_status

logger = logging.getLogger(__name__)


def _cmd_reformat(args: argparse.Namespace) -> int:
    raw_text = Path(args.input).read_text(encoding="utf-8")
    rules = CleaningRules(
        fix_place_names=not args.keep_place_names,
        strip_footnote_numbers=not args.keep_footnote_numbers,
    )
    cleaned = reformat(raw_text, rules=rules)
    if args.output:
        Path(args.output).write_text(cleaned + "\n", encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(cleaned), args.output)
    else:
        sys.stdout.write(cleaned + "\n")
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    try:
        engine = select_engine(args.engine)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1

    options = ConversionOptions(engine=engine, auto_clean=not args.no_clean)
    result = convert_pdf_to_markdown(args.pdf, args.output, options)
    if not result.success:
        return 1
    if not args.output:
        sys.stdout.write((result.markdown_content or "") + "\n")
    logger.info("Converted %s: %d characters, ~%d pages, %dms", args.pdf, result.char_count, result.page_count, result.processing_time)
    return 0


def _cmd_workflow(args: argparse.Namespace) -> int:
    report = run_full_workflow(args.directory, analyze_content=not args.no_analyze, show_progress=True)
    print(json.dumps(report, indent=2))
    return 0


def _cmd_check(_args: argparse.Namespace) -> int:
    print(format_dependency_status("marker", check_marker(), recommended=True))
    print(format_dependency_status("pymupdf4llm", check_pymupdf4llm()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(prog="file-converter", description="Convert PDFs to Markdown and clean the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_reformat = sub.add_parser("reformat", help="Clean a Markdown file and re-align its tables")
    p_reformat.add_argument("input", help="Raw Markdown file")
    p_reformat.add_argument("-o", "--output", help="Write here instead of stdout")
    p_reformat.add_argument("--keep-footnote-numbers", action="store_true", help="Do not strip stray 1-2 digit footnote markers")
    p_reformat.add_argument("--keep-place-names", action="store_true", help="Do not normalise 'word,word' spacing")
    p_reformat.set_defaults(handler=_cmd_reformat)

    p_convert = sub.add_parser("convert", help="Convert one PDF to Markdown")
    p_convert.add_argument("pdf", help="PDF file to convert")
    p_convert.add_argument("-o", "--output", help="Write Markdown here instead of stdout")
    p_convert.add_argument("--engine", choices=ENGINES, default=DEFAULT_ENGINE, help="Conversion engine")
    p_convert.add_argument("--no-clean", action="store_true", help="Skip table-aware cleanup of marker output")
    p_convert.set_defaults(handler=_cmd_convert)

    p_workflow = sub.add_parser("workflow", help="Convert and categorize every PDF under a directory")
    p_workflow.add_argument("directory", help="Directory to process")
    p_workflow.add_argument("--no-analyze", action="store_true", help="Skip content categorization")
    p_workflow.set_defaults(handler=_cmd_workflow)

    p_check = sub.add_parser("check", help="Report which conversion engines are available")
    p_check.set_defaults(handler=_cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected subcommand."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
