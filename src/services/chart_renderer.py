"""Standalone HTML chart pages, one per slide with a renderable graph."""

from __future__ import annotations

import html
import json
import logging
from typing import Dict, Optional, Sequence

from src.config.settings import OutputSettings
from src.domain.slide import Graph, Slide
from src.services.theme import PLOTLY_CDN, TAILWIND_CDN, PresentationTheme

logger = logging.getLogger(__name__)


def chart_filename(index: int, settings: Optional[OutputSettings] = None) -> str:
    """Return the file name for the 1-based chart ``index`` (``chart1.html``)."""
    settings = settings or OutputSettings()
    return f"{settings.chart_prefix}{index}{settings.chart_extension}"


def assign_chart_files(
    slides: Sequence[Slide], settings: Optional[OutputSettings] = None
) -> Dict[int, str]:
    """Map slide positions to chart file names.

    Only slides whose graph has both labels and values get a chart. Charts
    are numbered from 1 in slide order, independent of slide position.
    """
    chart_files: Dict[int, str] = {}
    for position, slide in enumerate(slides):
        if slide.has_chart:
            chart_files[position] = chart_filename(len(chart_files) + 1, settings)
    return chart_files


def _script_json(data) -> str:
    # Keep "</script>" inside a label from closing the inline script
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def render_chart_page(
    graph: Graph,
    index: int,
    theme: Optional[PresentationTheme] = None,
    language: str = "en",
) -> str:
    """Render a Plotly bar chart page for one graph.

    Labels and values are paired up to the shorter of the two series; a
    mismatch is logged, never raised.
    """
    theme = theme or PresentationTheme()

    if len(graph.labels) != len(graph.values):
        logger.warning(
            "Chart labels and values differ in length, truncating to the shorter series",
            extra={
                "chart_index": index,
                "label_count": len(graph.labels),
                "value_count": len(graph.values),
            },
        )

    pairs = graph.pairs()
    chart_id = f"chart-{index}"
    title = f"Chart {index}"

    trace = {
        "x": [label for label, _ in pairs],
        "y": [value for _, value in pairs],
        "type": "bar",
        "marker": {"color": theme.primary_color},
    }
    layout = {
        "title": {"text": title},
        "margin": {"t": 40, "r": 20, "b": 60, "l": 40},
        "yaxis": {"title": {"text": "Value"}},
    }

    return f"""<!DOCTYPE html>
<html lang="{html.escape(language)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(title)}</title>
  <script src="{TAILWIND_CDN}"></script>
  <script src="{PLOTLY_CDN}"></script>
  <style type="text/tailwindcss">{theme.build_base_css()}</style>
</head>
<body class="bg-gray-50 py-8">
  <div class="ppt-slide flex flex-col justify-center">
    <div id="{chart_id}" class="w-full h-full"></div>
  </div>
  <script>
    document.addEventListener('DOMContentLoaded', function () {{
      Plotly.newPlot('{chart_id}', [{_script_json(trace)}], {_script_json(layout)}, {{ responsive: true }});
    }});
  </script>
</body>
</html>
"""
