"""Unit tests for the shared config module."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pathlib import Path

from file_converter.config import CHARS_PER_PAGE, CONTENT_SAMPLE_CHARS, DEFAULT_ENGINE, ENGINES, IMAGE_EXTENSIONS, ROOT, SERVER_NAME


class TestRoot:

    def test_returns_path_object(self):
        assert isinstance(ROOT, Path)

    def test_root_is_project_root(self):
        """ROOT should point to the project root (contains pyproject.toml)."""
        assert (ROOT / "pyproject.toml").exists()


class TestConstants:

    def test_default_engine_is_known(self):
        assert DEFAULT_ENGINE in ENGINES

    def test_engines(self):
        assert ENGINES == ("marker", "pymupdf4llm")

    def test_page_estimate_constant(self):
        assert CHARS_PER_PAGE == 3000

    def test_content_sample_size(self):
        assert CONTENT_SAMPLE_CHARS == 2000

    def test_image_extensions_are_lowercase(self):
        assert all(ext == ext.lower() and ext.startswith(".") for ext in IMAGE_EXTENSIONS)

    def test_server_name(self):
        assert SERVER_NAME == "file-converter"
