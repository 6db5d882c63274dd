"""Shared configuration for the PDF conversion and Markdown cleaning tools.

Values come from the environment, with ``ROOT/.env`` loaded first so a local
checkout can pin engine binaries and timeouts without exporting variables.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

SERVER_NAME = "file-converter"
SERVER_VERSION = "1.0.0"

ENGINES = ("marker", "pymupdf4llm")

# Engine used when a caller does not ask for one explicitly
DEFAULT_ENGINE = os.getenv("FILE_CONVERTER_ENGINE", "marker")

# Executable for marker's single-file converter
MARKER_COMMAND = os.getenv("MARKER_COMMAND", "marker_single")

# Seconds allowed for one conversion subprocess, and for availability probes
CONVERSION_TIMEOUT = int(os.getenv("FILE_CONVERTER_TIMEOUT", "1800"))
CHECK_TIMEOUT = int(os.getenv("FILE_CONVERTER_CHECK_TIMEOUT", "60"))

# Rough characters-per-page used to estimate page counts from Markdown length
CHARS_PER_PAGE = 3000

# Leading characters of a Markdown file inspected during categorization
CONTENT_SAMPLE_CHARS = 2000

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif"}
