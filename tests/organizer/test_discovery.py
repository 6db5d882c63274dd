"""Tests for PDF / Markdown discovery and companion-file checks."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pathlib import Path

from file_converter.organizer.discovery import (
    candidate_md_paths,
    check_md_exists,
    companion_md_path,
    find_markdown_files,
    find_pdf_files,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


# ===========================================================================
# find_pdf_files / find_markdown_files tests
# ===========================================================================


class TestFindPdfFiles:

    def test_recursive_and_sorted(self, tmp_path):
        b = _touch(tmp_path / "b.pdf")
        a = _touch(tmp_path / "sub" / "a.PDF")
        _touch(tmp_path / "notes.txt")
        assert find_pdf_files(tmp_path) == sorted([a, b])

    def test_non_recursive(self, tmp_path):
        top = _touch(tmp_path / "top.pdf")
        _touch(tmp_path / "sub" / "deep.pdf")
        assert find_pdf_files(tmp_path, recursive=False) == [top]

    def test_missing_directory_yields_nothing(self, tmp_path):
        assert not find_pdf_files(tmp_path / "missing")

    def test_accepts_string_path(self, tmp_path):
        pdf = _touch(tmp_path / "x.pdf")
        assert find_pdf_files(str(tmp_path)) == [pdf]


class TestFindMarkdownFiles:

    def test_finds_markdown_only(self, tmp_path):
        md = _touch(tmp_path / "deep" / "doc.md")
        _touch(tmp_path / "doc.pdf")
        assert find_markdown_files(tmp_path) == [md]


# ===========================================================================
# Companion Markdown tests
# ===========================================================================


class TestCompanionMarkdown:

    def test_candidate_names(self):
        names = [path.name for path in candidate_md_paths("/docs/My Report (v2).pdf")]
        assert names == ["My Report (v2).md", "My_Report_(v2).md", "My_Report__v2_.md"]

    def test_candidates_sit_next_to_pdf(self):
        assert all(path.parent == Path("/docs") for path in candidate_md_paths("/docs/a b.pdf"))

    def test_companion_path_is_sanitised_name(self):
        assert companion_md_path("/docs/My Report (v2).pdf") == Path("/docs/My_Report__v2_.md")

    def test_simple_name(self):
        assert companion_md_path("/docs/report.pdf") == Path("/docs/report.md")

    def test_no_markdown(self, tmp_path):
        pdf = _touch(tmp_path / "report.pdf")
        assert not check_md_exists(pdf)

    def test_plain_stem_counts(self, tmp_path):
        pdf = _touch(tmp_path / "my report.pdf")
        _touch(tmp_path / "my report.md")
        assert check_md_exists(pdf)

    def test_underscored_stem_counts(self, tmp_path):
        pdf = _touch(tmp_path / "my report.pdf")
        _touch(tmp_path / "my_report.md")
        assert check_md_exists(pdf)

    def test_directory_with_markdown_name_does_not_count(self, tmp_path):
        pdf = _touch(tmp_path / "report.pdf")
        (tmp_path / "report.md").mkdir()
        assert not check_md_exists(pdf)
