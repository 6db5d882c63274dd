"""Create category folders for organizing converted documents."""

import logging
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

PDF_SUBFOLDER = "PDFs"
MD_SUBFOLDER = "MDs"


class CategoryFolder(BaseModel):
    """One category directory created by organize_structure."""

    category: str
    path: str
    files_to_organize: int
    subfolders_created: bool


def organize_structure(
    directory: str | Path,
    categories: dict[str, list[str]],
    create_pdf_md_subfolders: bool = True,
) -> list[CategoryFolder]:
    """Create ``<directory>/<category>`` for every category, optionally with PDFs/ and MDs/.

    Existing folders are left as they are.  Files are not moved; the file
    lists only size the report.
    """
    root = Path(directory).expanduser()
    results: list[CategoryFolder] = []

    for category, files in categories.items():
        category_path = root / category
        category_path.mkdir(parents=True, exist_ok=True)
        if create_pdf_md_subfolders:
            (category_path / PDF_SUBFOLDER).mkdir(exist_ok=True)
            (category_path / MD_SUBFOLDER).mkdir(exist_ok=True)

        logger.info("Prepared category folder %s (%d files)", category_path, len(files))
        results.append(
            CategoryFolder(
                category=category,
                path=str(category_path),
                files_to_organize=len(files),
                subfolders_created=create_pdf_md_subfolders,
            )
        )
    return results
