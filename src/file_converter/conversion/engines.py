"""Availability checks and installation for the PDF conversion engines.

- marker: an external CLI (``marker_single``), probed by running ``--help``.
- pymupdf4llm: a Python package, probed by locating the module and reading
  its installed version.
"""

import importlib.util
import logging
import subprocess
import sys
from importlib import metadata

from file_converter.config import CHECK_TIMEOUT, MARKER_COMMAND
from file_converter.conversion.schema import DependencyStatus

logger = logging.getLogger(__name__)

PYMUPDF4LLM = "pymupdf4llm"


def check_marker() -> DependencyStatus:
    """Return whether the marker CLI can be executed."""
    try:
        proc = subprocess.run(
            [MARKER_COMMAND, "--help"],
            capture_output=True,
            text=True,
            timeout=CHECK_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("marker probe failed: %s", exc)
        return DependencyStatus(available=False, error=str(exc))

    # Some marker releases exit non-zero on --help but still print usage
    if proc.returncode == 0 or "usage:" in proc.stdout or MARKER_COMMAND in proc.stdout:
        return DependencyStatus(available=True, version="available")
    return DependencyStatus(available=False, error=proc.stderr.strip() or "marker not found")


def check_pymupdf4llm() -> DependencyStatus:
    """Return whether pymupdf4llm is importable, with its version."""
    if importlib.util.find_spec(PYMUPDF4LLM) is None:
        return DependencyStatus(available=False, error="pymupdf4llm not found")
    try:
        version = metadata.version(PYMUPDF4LLM)
    except metadata.PackageNotFoundError:
        version = "unknown"
    return DependencyStatus(available=True, version=version)


def install_pymupdf4llm() -> DependencyStatus:
    """Install pymupdf4llm into the running interpreter's environment with pip."""
    cmd = [sys.executable, "-m", "pip", "install", PYMUPDF4LLM]
    logger.info("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.error("pip install failed to start: %s", exc)
        return DependencyStatus(available=False, error=str(exc))

    if proc.returncode != 0:
        logger.error("pip install exited with code %d", proc.returncode)
        return DependencyStatus(available=False, error=proc.stderr.strip() or "Installation failed")

    importlib.invalidate_caches()
    return check_pymupdf4llm()
