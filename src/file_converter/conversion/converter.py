"""PDF to Markdown conversion with marker or pymupdf4llm.

marker runs as a subprocess writing into a temporary directory; its raw
output carries HTML artifacts and misaligned tables, so it is passed through
the table-aware reformatter unless ``auto_clean`` is off.  pymupdf4llm runs
in-process.  Conversion failures never raise: they come back as a
ConversionResult with ``success=False`` and an ``error`` message.

Usage:
  python -m file_converter.conversion.converter paper.pdf [output.md]
"""

import logging
import subprocess
import sys
import tempfile
import time
from pathlib import Path

import psutil

from file_converter.config import CHARS_PER_PAGE, CONVERSION_TIMEOUT, IMAGE_EXTENSIONS, MARKER_COMMAND
from file_converter.conversion.engines import check_marker, check_pymupdf4llm
from file_converter.conversion.schema import ConversionOptions, ConversionResult
from file_converter.reformat import reformat

logger = logging.getLogger(__name__)

AUTO_CLEAN_WARNING = "Content automatically cleaned (table-aware)"
PAGE_CHUNK_SEPARATOR = "\n\n---\n\n"

# pymupdf4llm table detection strategy for each user-facing choice
TABLE_STRATEGIES = {"accurate": "lines_strict", "fast": "lines"}


# ─── Helpers ──────────────────────────────────────────────────────────────────


def validate_path(file_path: str | Path) -> Path:
    """Expand '~' and resolve relative paths against the working directory."""
    return Path(file_path).expanduser().resolve()


def estimate_page_count(content: str) -> int:
    """Rough page estimate from Markdown length (always at least 1)."""
    return max(1, len(content) // CHARS_PER_PAGE)


def _elapsed_ms(start: float) -> int:
    return int((time.time() - start) * 1000)


def _memory_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024


def _failure(error: str, start: float) -> ConversionResult:
    logger.error("Conversion failed: %s", error)
    return ConversionResult(success=False, error=error, processing_time=_elapsed_ms(start))


def _write_output(content: str, output_path: str | None) -> str | None:
    if not output_path:
        return None
    target = validate_path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Wrote %d characters to %s", len(content), target)
    return str(target)


def count_images(image_path: str | None) -> int:
    """Count extracted image files in *image_path* (0 if the directory is missing)."""
    if not image_path:
        return 0
    directory = validate_path(image_path)
    if not directory.is_dir():
        return 0
    return sum(1 for path in directory.iterdir() if path.suffix.lower() in IMAGE_EXTENSIONS)


# ─── marker ───────────────────────────────────────────────────────────────────


def find_marker_output(output_dir: Path, pdf_path: Path) -> Path:
    """Locate the Markdown file marker wrote for *pdf_path* inside *output_dir*.

    marker normally writes ``<output_dir>/<stem>/<stem>.md``; when it sanitises
    the name differently, fall back to the first ``.md`` in the first
    sub-directory.
    """
    expected = output_dir / pdf_path.stem / f"{pdf_path.stem}.md"
    if expected.is_file():
        return expected

    subdirs = sorted(path for path in output_dir.iterdir() if path.is_dir())
    if not subdirs:
        raise RuntimeError("No marker output directory found")
    md_files = sorted(subdirs[0].glob("*.md"))
    if not md_files:
        raise RuntimeError("No markdown file found in marker directory")
    return md_files[0]


def convert_with_marker(pdf_path: Path, output_path: str | None, options: ConversionOptions) -> ConversionResult:
    """Convert with the marker CLI, then reformat the output when auto_clean is on."""
    start = time.time()

    status = check_marker()
    if not status.available:
        return _failure(f"Marker not available: {status.error}", start)

    try:
        with tempfile.TemporaryDirectory(prefix="marker-") as temp_dir:
            cmd = [MARKER_COMMAND, str(pdf_path), "--output_dir", temp_dir]
            logger.info("Running: %s", " ".join(cmd))
            proc = subprocess.run(cmd, capture_output=True, text=True, timeout=CONVERSION_TIMEOUT, check=False)
            if proc.returncode != 0:
                raise RuntimeError(proc.stderr.strip() or f"Marker exited with code {proc.returncode}")
            content = find_marker_output(Path(temp_dir), pdf_path).read_text(encoding="utf-8")

        warnings: list[str] = []
        if options.auto_clean:
            content = reformat(content)
            warnings.append(AUTO_CLEAN_WARNING)

        output_file = _write_output(content, output_path)
    except subprocess.TimeoutExpired:
        return _failure(f"Marker timed out after {CONVERSION_TIMEOUT}s", start)
    except (OSError, subprocess.SubprocessError, RuntimeError) as exc:
        return _failure(str(exc), start)

    return ConversionResult(
        success=True,
        markdown_content=content,
        output_file=output_file,
        page_count=estimate_page_count(content),
        char_count=len(content),
        images_extracted=0,  # marker keeps images inside its own output directory
        processing_time=_elapsed_ms(start),
        warnings=warnings,
    )


# ─── pymupdf4llm ──────────────────────────────────────────────────────────────


def _pymupdf4llm_kwargs(options: ConversionOptions) -> dict:
    kwargs: dict = {"table_strategy": TABLE_STRATEGIES[options.table_strategy]}
    if options.page_chunks:
        kwargs["page_chunks"] = True
    if options.write_images:
        kwargs["write_images"] = True
    if options.image_path:
        kwargs["image_path"] = str(validate_path(options.image_path))
    if options.extract_content == "text":
        kwargs["ignore_images"] = True
        kwargs["ignore_graphics"] = True
    return kwargs


def convert_with_pymupdf4llm(pdf_path: Path, output_path: str | None, options: ConversionOptions) -> ConversionResult:
    """Convert in-process with pymupdf4llm; page chunks are joined with '---' rules."""
    start = time.time()

    if not check_pymupdf4llm().available:
        return _failure("pymupdf4llm not available", start)
    import pymupdf4llm  # pylint: disable=import-outside-toplevel

    initial_memory = _memory_mb()
    try:
        md_content = pymupdf4llm.to_markdown(str(pdf_path), **_pymupdf4llm_kwargs(options))
        peak_memory = _memory_mb()

        if isinstance(md_content, list):
            page_count = len(md_content)
            md_content = PAGE_CHUNK_SEPARATOR.join(chunk["text"] for chunk in md_content)
        else:
            page_count = estimate_page_count(md_content)

        output_file = _write_output(md_content, output_path)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return _failure(f"pymupdf4llm conversion failed: {exc}", start)

    images = count_images(options.image_path) if options.write_images else 0
    return ConversionResult(
        success=True,
        markdown_content=md_content,
        output_file=output_file,
        page_count=page_count,
        char_count=len(md_content),
        images_extracted=images,
        processing_time=_elapsed_ms(start),
        memory_used=max(0.0, peak_memory - initial_memory),
    )


# ─── Entry Point ──────────────────────────────────────────────────────────────


def select_engine(requested: str) -> str:
    """Return the engine to use for *requested*, falling back from marker to pymupdf4llm.

    Raises RuntimeError when no usable engine is installed.
    """
    if requested == "marker":
        marker = check_marker()
        if marker.available:
            return "marker"
        pymupdf = check_pymupdf4llm()
        if not pymupdf.available:
            raise RuntimeError(f"Neither marker nor pymupdf4llm available. Marker: {marker.error}, pymupdf4llm: {pymupdf.error}")
        logger.warning("marker not available (%s) -- falling back to pymupdf4llm", marker.error)
        return "pymupdf4llm"

    pymupdf = check_pymupdf4llm()
    if not pymupdf.available:
        raise RuntimeError(f"pymupdf4llm not available: {pymupdf.error}")
    return "pymupdf4llm"


def convert_pdf_to_markdown(
    pdf_path: str | Path,
    output_path: str | None = None,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Convert one PDF to Markdown with the engine named in *options*."""
    start = time.time()
    options = options or ConversionOptions()

    path = validate_path(pdf_path)
    if not path.is_file():
        return _failure(f"PDF not found: {path}", start)

    logger.info("Converting %s with %s", path, options.engine)
    if options.engine == "marker":
        return convert_with_marker(path, output_path, options)
    return convert_with_pymupdf4llm(path, output_path, options)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if len(sys.argv) not in (2, 3):
        sys.exit("usage: python -m file_converter.conversion.converter <pdf> [output.md]")
    result = convert_pdf_to_markdown(sys.argv[1], sys.argv[2] if len(sys.argv) == 3 else None)
    print(result.model_dump_json(indent=2, exclude={"markdown_content"}))
