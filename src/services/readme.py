"""README bundled next to the generated presentation."""

from typing import Optional, Sequence

from src.config.settings import OutputSettings
from src.services.presentation_renderer import preview_labels


def generate_readme(chart_files: Sequence[str] = (), settings: Optional[OutputSettings] = None) -> str:
    """Return Markdown describing the generated files and how to open them."""
    settings = settings or OutputSettings()

    lines = [
        "# ReSlides",
        "",
        "This bundle was generated by **ReSlides** from a plain-text slide script.",
        "",
        "## Contents",
        "",
        f"- **{settings.presentation_filename}**: the complete presentation.",
    ]
    if chart_files:
        lines.append(
            f"- **{settings.chart_prefix}*{settings.chart_extension}**: "
            "one standalone page per chart:"
        )
        lines.extend(f"  - {name}" for name in chart_files)
    lines.extend([
        f"- **{settings.readme_filename}**: this file.",
        "",
        "## Usage",
        "",
        "1. Extract the archive, keeping all files in the same folder.",
        f"2. Open `{settings.presentation_filename}` in a web browser.",
        "3. Chart slides embed their chart page, so an internet connection is needed"
        " to load the charting and styling scripts.",
        "",
    ])
    if chart_files:
        add_label = preview_labels(settings.language)[0]
        lines.extend([
            "## Chart previews",
            "",
            "Each chart slide shows its chart page as a preview next to the text.",
            "",
            f"- Click **{add_label}** to add another preview of the same chart.",
            "- Click the red **×** on a preview to remove it.",
            "- Drag a preview up or down to reorder the previews of that slide.",
            "",
        ])
    lines.extend([
        "## Script format",
        "",
        "```",
        "Diapositiva 1",
        "Título: My presentation",
        "Contenido: First point; Second point",
        "",
        "Diapositiva 2",
        "Título: Usage",
        "Datos: Labels: A, B, C; Valores: 4.2, 3.8, 2.5",
        "Descripción: Usage by activity",
        "```",
        "",
        "English keywords (`Slide`, `Title`, `Content`, `Data`, `Description`,"
        " `Attachment`) are accepted as well.",
        "",
    ])
    return "\n".join(lines)
