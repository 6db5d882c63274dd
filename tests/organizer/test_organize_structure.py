"""Tests for category folder creation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from file_converter.organizer.structure import MD_SUBFOLDER, PDF_SUBFOLDER, organize_structure


class TestOrganizeStructure:

    def test_creates_category_and_subfolders(self, tmp_path):
        results = organize_structure(tmp_path, {"Research": ["a.md", "b.md"]})
        assert (tmp_path / "Research" / PDF_SUBFOLDER).is_dir()
        assert (tmp_path / "Research" / MD_SUBFOLDER).is_dir()
        assert results[0].category == "Research"
        assert results[0].files_to_organize == 2
        assert results[0].subfolders_created

    def test_without_subfolders(self, tmp_path):
        results = organize_structure(tmp_path, {"General": []}, create_pdf_md_subfolders=False)
        assert (tmp_path / "General").is_dir()
        assert not (tmp_path / "General" / PDF_SUBFOLDER).exists()
        assert not results[0].subfolders_created

    def test_existing_folders_are_kept(self, tmp_path):
        existing = tmp_path / "Planning" / MD_SUBFOLDER
        existing.mkdir(parents=True)
        (existing / "keep.md").write_text("x")
        organize_structure(tmp_path, {"Planning": ["keep.md"]})
        assert (existing / "keep.md").read_text() == "x"

    def test_files_are_not_moved(self, tmp_path):
        doc = tmp_path / "a.md"
        doc.write_text("x")
        organize_structure(tmp_path, {"Research": [str(doc)]})
        assert doc.exists()

    def test_one_result_per_category(self, tmp_path):
        results = organize_structure(tmp_path, {"Research": [], "Business": ["x"]})
        assert [r.category for r in results] == ["Research", "Business"]
        assert results[1].path == str(tmp_path / "Business")
