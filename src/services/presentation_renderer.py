"""Render parsed slides into a single styled HTML presentation.

The first slide is a cover: gradient background, large title and up to three
content lines underneath. Every other slide gets a heading, an optional
caption from its description and its content as paragraphs. Slides with a
chart page get a two-column layout. The chart column holds a preview
container: the viewer can add more previews of the same chart, remove one
with its red cross and drag previews to reorder them.

All slide text is HTML-escaped. Attachments are not rendered.
"""

from __future__ import annotations

import html
import logging
from typing import List, Mapping, Optional, Sequence

from src.domain.slide import Slide
from src.services.theme import TAILWIND_CDN, PresentationTheme

logger = logging.getLogger(__name__)

DEFAULT_COVER_TITLE = "Presentation title"
COVER_LINE_CLASSES = (
    "text-2xl mb-2",
    "text-xl opacity-90",
    "text-lg opacity-80 mt-4",
)

PREVIEW_LABELS = {
    "en": ("Add preview", "Remove preview"),
    "es": ("Añadir vista previa", "Quitar vista previa"),
}

PREVIEW_SCRIPT = """
(function () {
  var dragged = null;

  function createPreview(file) {
    var wrapper = document.createElement("div");
    wrapper.className = "chart-preview relative border rounded overflow-hidden shadow";
    wrapper.draggable = true;
    var frame = document.createElement("iframe");
    frame.className = "chart-frame w-full h-64 border-0";
    frame.src = file;
    frame.style.pointerEvents = "none";
    var remove = document.createElement("button");
    remove.type = "button";
    remove.className = "remove-preview absolute top-1 right-1 text-sm bg-red-600 text-white rounded px-1";
    remove.textContent = "\u00d7";
    wrapper.appendChild(frame);
    wrapper.appendChild(remove);
    return wrapper;
  }

  function previewAfter(container, y) {
    var found = null;
    var best = -Infinity;
    container.querySelectorAll(".chart-preview").forEach(function (el) {
      if (el === dragged) return;
      var box = el.getBoundingClientRect();
      var offset = y - box.top - box.height / 2;
      if (offset < 0 && offset > best) {
        best = offset;
        found = el;
      }
    });
    return found;
  }

  document.addEventListener("click", function (event) {
    var remove = event.target.closest(".remove-preview");
    if (remove) {
      remove.closest(".chart-preview").remove();
      return;
    }
    var add = event.target.closest(".add-preview");
    if (add) {
      var column = add.closest(".chart-column");
      var file = column.querySelector(".graph-file").value;
      column.querySelector(".preview-container").appendChild(createPreview(file));
    }
  });

  document.addEventListener("dragstart", function (event) {
    dragged = event.target.closest ? event.target.closest(".chart-preview") : null;
  });

  document.addEventListener("dragend", function () {
    dragged = null;
  });

  document.addEventListener("dragover", function (event) {
    if (!dragged || !event.target.closest) return;
    var container = event.target.closest(".preview-container");
    if (container !== dragged.parentNode) return;
    event.preventDefault();
    var after = previewAfter(container, event.clientY);
    if (after) {
      container.insertBefore(dragged, after);
    } else {
      container.appendChild(dragged);
    }
  });
})();
"""


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def preview_labels(language: str) -> tuple:
    """Return the (add, remove) button labels for a document language."""
    return PREVIEW_LABELS.get(language.split("-")[0].lower(), PREVIEW_LABELS["en"])


def render_chart_preview(chart_file: str, title: str, remove_label: str) -> str:
    """Render one draggable preview of a chart page."""
    return (
        "\n        <div class=\"chart-preview relative border rounded overflow-hidden shadow\" draggable=\"true\">"
        f"\n          <iframe class=\"chart-frame w-full h-64 border-0\" src=\"{_escape(chart_file)}\" "
        f"title=\"{_escape(title)}\" style=\"pointer-events: none;\"></iframe>"
        "\n          <button type=\"button\" class=\"remove-preview absolute top-1 right-1 text-sm bg-red-600 "
        f"text-white rounded px-1\" title=\"{_escape(remove_label)}\">&times;</button>"
        "\n        </div>"
    )


def render_cover_slide(slide: Slide, theme: PresentationTheme) -> str:
    """Render the opening slide."""
    title = _escape(slide.title or DEFAULT_COVER_TITLE)
    lines = "".join(
        f"\n    <p class=\"{css}\" style=\"{theme.body_style()}\">{_escape(text)}</p>"
        for css, text in zip(COVER_LINE_CLASSES, slide.content)
    )
    background = (
        f"background: linear-gradient(135deg, {theme.primary_color} 0%, "
        f"{theme.secondary_color} 100%);"
    )
    return (
        f"\n<div class=\"ppt-slide cover-slide flex flex-col justify-center\" style=\"{background}\">"
        f"\n  <div class=\"w-full text-white\">"
        f"\n    <h1 class=\"text-5xl md:text-6xl font-bold mb-6\" style=\"{theme.heading_style()}\">{title}</h1>"
        f"\n    <div class=\"w-24 h-1 mb-8\" style=\"background: {theme.accent_color};\"></div>"
        f"{lines}"
        f"\n  </div>"
        f"\n</div>"
    )


def render_content_slide(
    slide: Slide,
    theme: PresentationTheme,
    chart_file: Optional[str] = None,
    chart_number: int = 1,
    language: str = "en",
) -> str:
    """Render a body slide.

    When ``chart_file`` is set the chart column gets a preview container
    numbered ``chart_number`` with one preview, an add button and a hidden
    input holding the chart page name.
    """
    parts: List[str] = [
        "\n<div class=\"ppt-slide content-slide flex flex-col\">",
        f"\n  <h2 class=\"text-4xl md:text-5xl font-bold mb-6\" "
        f"style=\"color: {theme.primary_color}; {theme.heading_style()}\">{_escape(slide.title)}</h2>",
    ]
    caption = (
        f"\n      <h3 class=\"caption text-2xl font-bold mb-3\" style=\"color: {theme.primary_color};\">"
        f"{_escape(slide.description)}</h3>"
        if slide.description
        else ""
    )

    if chart_file:
        add_label, remove_label = preview_labels(language)
        paragraphs = "".join(
            f"\n      <p class=\"text-base leading-relaxed mb-2\" style=\"color: {theme.text_color};\">{_escape(item)}</p>"
            for item in slide.content
        )
        parts.append(
            "\n  <div class=\"flex flex-1 gap-6\">"
            "\n    <div class=\"w-2/5 flex flex-col justify-center\">"
            f"{caption}{paragraphs}"
            "\n    </div>"
            "\n    <div class=\"chart-column w-3/5 relative\">"
            "\n      <button type=\"button\" class=\"add-preview absolute top-2 right-2 z-10 text-white px-2 py-1 "
            f"text-xs rounded\" style=\"background: {theme.accent_color};\">{_escape(add_label)}</button>"
            f"\n      <div class=\"preview-container space-y-2\" id=\"preview-container-{chart_number}\">"
            f"{render_chart_preview(chart_file, slide.title or chart_file, remove_label)}"
            "\n      </div>"
            f"\n      <input type=\"hidden\" class=\"graph-file\" value=\"{_escape(chart_file)}\">"
            "\n    </div>"
            "\n  </div>"
        )
    else:
        if caption:
            parts.append(caption.replace("\n      ", "\n  "))
        parts.extend(
            f"\n  <p class=\"text-xl leading-relaxed mb-3\" style=\"color: {theme.text_color};\">{_escape(item)}</p>"
            for item in slide.content
        )

    parts.append("\n</div>")
    return "".join(parts)


def render_presentation(
    slides: Sequence[Slide],
    chart_files: Optional[Mapping[int, str]] = None,
    theme: Optional[PresentationTheme] = None,
    title: str = "Generated presentation",
    language: str = "en",
) -> str:
    """Render all slides into one HTML document.

    Args:
        slides: Parsed slides in display order
        chart_files: Slide position -> chart page file name
        theme: Colours and fonts, defaults to the standard theme
        title: Document title
        language: ``lang`` attribute of the document, also picks the preview
            button labels

    Returns:
        Complete HTML document as a string
    """
    theme = theme or PresentationTheme()
    chart_files = chart_files or {}

    body = []
    previews = 0
    for position, slide in enumerate(slides):
        if position == 0:
            body.append(render_cover_slide(slide, theme))
            continue
        chart_file = chart_files.get(position)
        if chart_file:
            previews += 1
        body.append(render_content_slide(slide, theme, chart_file, previews, language))
    if previews:
        body.append(f"\n<script>{PREVIEW_SCRIPT}</script>")

    logger.info(
        "Rendered presentation",
        extra={"slide_count": len(slides), "chart_count": len(chart_files)},
    )

    return f"""<!DOCTYPE html>
<html lang="{_escape(language)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_escape(title)}</title>
  <script src="{TAILWIND_CDN}"></script>
  <link href="{_escape(theme.fonts_url)}" rel="stylesheet">
  <style type="text/tailwindcss">{theme.build_base_css()}</style>
</head>
<body class="bg-gray-50 py-8">{''.join(body)}
</body>
</html>
"""
