"""Assemble the presentation, chart pages and README into one bundle."""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from src.config.settings import OutputSettings
from src.domain.slide import Slide
from src.services.chart_renderer import assign_chart_files, render_chart_page
from src.services.presentation_renderer import render_presentation
from src.services.readme import generate_readme
from src.services.theme import PresentationTheme
from src.utils.error_handling import EmptyScriptError, ExportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleFile:
    """One generated file: its archive name and text content."""

    name: str
    content: str


@dataclass
class Bundle:
    """Ordered set of generated files.

    Files are kept in the order they were produced: the presentation first,
    then chart pages in chart order, then the README.
    """

    archive_name: str
    files: List[BundleFile] = field(default_factory=list)

    @property
    def file_names(self) -> List[str]:
        return [f.name for f in self.files]

    def get(self, name: str) -> BundleFile:
        for bundle_file in self.files:
            if bundle_file.name == name:
                return bundle_file
        raise KeyError(name)

    def to_zip_bytes(self) -> bytes:
        """Return the bundle as a deflated zip archive."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for bundle_file in self.files:
                archive.writestr(bundle_file.name, bundle_file.content)
        return buffer.getvalue()


def build_bundle(
    slides: Sequence[Slide],
    settings: Optional[OutputSettings] = None,
    theme: Optional[PresentationTheme] = None,
) -> Bundle:
    """Render every artifact for a parsed script.

    Raises:
        EmptyScriptError: If there are no slides to render
    """
    if not slides:
        raise EmptyScriptError()

    settings = settings or OutputSettings()
    theme = theme or PresentationTheme()

    chart_files = assign_chart_files(slides, settings)
    bundle = Bundle(archive_name=settings.archive_filename)

    bundle.files.append(
        BundleFile(
            name=settings.presentation_filename,
            content=render_presentation(
                slides,
                chart_files,
                theme,
                title=settings.document_title,
                language=settings.language,
            ),
        )
    )

    for index, (position, name) in enumerate(sorted(chart_files.items()), start=1):
        graph = slides[position].graph
        bundle.files.append(
            BundleFile(name=name, content=render_chart_page(graph, index, theme, settings.language))
        )

    bundle.files.append(
        BundleFile(
            name=settings.readme_filename,
            content=generate_readme(list(chart_files.values()), settings),
        )
    )

    logger.info(
        "Built presentation bundle",
        extra={"slide_count": len(slides), "file_count": len(bundle.files)},
    )
    return bundle


def write_bundle(bundle: Bundle, directory: Path, as_zip: bool = False) -> List[Path]:
    """Write a bundle to ``directory``.

    Args:
        bundle: Bundle to write
        directory: Target directory, created if missing
        as_zip: Write a single archive instead of loose files

    Returns:
        Paths written

    Raises:
        ExportError: If the files cannot be written
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
        if as_zip:
            archive_path = directory / bundle.archive_name
            archive_path.write_bytes(bundle.to_zip_bytes())
            return [archive_path]

        written = []
        for bundle_file in bundle.files:
            path = directory / bundle_file.name
            path.write_text(bundle_file.content, encoding="utf-8")
            written.append(path)
        return written

    except OSError as e:
        raise ExportError(
            f"Failed to write bundle to {directory}: {e}",
            details={"directory": str(directory)},
        ) from e
