"""Export parsed slides to a PowerPoint file with python-pptx."""

from __future__ import annotations

import io
import logging
from typing import Optional, Sequence

from pptx import Presentation
from pptx.chart.data import CategoryChartData
from pptx.dml.color import RGBColor
from pptx.enum.chart import XL_CHART_TYPE
from pptx.util import Inches, Pt

from src.domain.slide import Slide
from src.services.presentation_renderer import DEFAULT_COVER_TITLE
from src.services.theme import PresentationTheme
from src.utils.error_handling import EmptyScriptError, ExportError

logger = logging.getLogger(__name__)

# Indices into the default python-pptx template
TITLE_LAYOUT = 0
TITLE_AND_CONTENT_LAYOUT = 1
TITLE_ONLY_LAYOUT = 5

SLIDE_WIDTH = Inches(10)
SLIDE_HEIGHT = Inches(7.5)
COVER_SUBTITLE_LINES = 3


def _rgb(hex_color: str) -> RGBColor:
    return RGBColor.from_string(hex_color.lstrip("#").upper())


def _fill_bullets(text_frame, items: Sequence[str], theme: PresentationTheme) -> None:
    text_frame.clear()
    text_frame.word_wrap = True
    for i, item in enumerate(items):
        paragraph = text_frame.paragraphs[0] if i == 0 else text_frame.add_paragraph()
        paragraph.text = item
        paragraph.level = 0
        for run in paragraph.runs:
            run.font.color.rgb = _rgb(theme.text_color)


def _style_title(shape, theme: PresentationTheme) -> None:
    for paragraph in shape.text_frame.paragraphs:
        for run in paragraph.runs:
            run.font.color.rgb = _rgb(theme.primary_color)
            run.font.bold = True


def _add_cover(prs, slide: Slide, theme: PresentationTheme) -> None:
    pptx_slide = prs.slides.add_slide(prs.slide_layouts[TITLE_LAYOUT])
    pptx_slide.shapes.title.text = slide.title or DEFAULT_COVER_TITLE
    _style_title(pptx_slide.shapes.title, theme)
    subtitle = pptx_slide.placeholders[1]
    subtitle.text = "\n".join(slide.content[:COVER_SUBTITLE_LINES])


def _add_chart(pptx_slide, slide: Slide, theme: PresentationTheme) -> None:
    pairs = slide.graph.pairs()
    if len(slide.graph.labels) != len(slide.graph.values):
        logger.warning(
            "Chart labels and values differ in length, truncating to the shorter series",
            extra={
                "slide_title": slide.title,
                "label_count": len(slide.graph.labels),
                "value_count": len(slide.graph.values),
            },
        )

    chart_data = CategoryChartData()
    chart_data.categories = [label for label, _ in pairs]
    chart_data.add_series("Value", [value for _, value in pairs])

    graphic_frame = pptx_slide.shapes.add_chart(
        XL_CHART_TYPE.COLUMN_CLUSTERED,
        Inches(4.8), Inches(1.6), Inches(4.8), Inches(5.0),
        chart_data,
    )
    chart = graphic_frame.chart
    chart.has_legend = False
    if slide.description:
        chart.has_title = True
        chart.chart_title.text_frame.text = slide.description
    else:
        chart.has_title = False

    fill = chart.plots[0].series[0].format.fill
    fill.solid()
    fill.fore_color.rgb = _rgb(theme.primary_color)


def _add_content(prs, slide: Slide, theme: PresentationTheme) -> None:
    if slide.has_chart:
        pptx_slide = prs.slides.add_slide(prs.slide_layouts[TITLE_ONLY_LAYOUT])
        pptx_slide.shapes.title.text = slide.title
        textbox = pptx_slide.shapes.add_textbox(Inches(0.5), Inches(1.6), Inches(4.0), Inches(5.0))
        _fill_bullets(textbox.text_frame, slide.content, theme)
        _add_chart(pptx_slide, slide, theme)
    else:
        pptx_slide = prs.slides.add_slide(prs.slide_layouts[TITLE_AND_CONTENT_LAYOUT])
        pptx_slide.shapes.title.text = slide.title
        _fill_bullets(pptx_slide.placeholders[1].text_frame, slide.content, theme)
        if slide.description:
            caption = pptx_slide.shapes.add_textbox(Inches(0.5), Inches(6.7), Inches(9.0), Inches(0.6))
            caption.text_frame.text = slide.description
            caption.text_frame.paragraphs[0].runs[0].font.size = Pt(14)
            caption.text_frame.paragraphs[0].runs[0].font.italic = True

    _style_title(pptx_slide.shapes.title, theme)


def export_pptx(slides: Sequence[Slide], theme: Optional[PresentationTheme] = None) -> bytes:
    """Build a .pptx file from parsed slides.

    The first slide uses the title layout with up to three content lines as
    subtitle. Other slides list their content as bullets; slides with a
    renderable graph also get a clustered column chart titled with the
    slide description.

    Args:
        slides: Parsed slides in display order
        theme: Colours, defaults to the standard theme

    Returns:
        The presentation file contents

    Raises:
        EmptyScriptError: If there are no slides
        ExportError: If python-pptx fails to build or save the file
    """
    if not slides:
        raise EmptyScriptError()

    theme = theme or PresentationTheme()

    try:
        prs = Presentation()
        prs.slide_width = SLIDE_WIDTH
        prs.slide_height = SLIDE_HEIGHT

        for position, slide in enumerate(slides):
            if position == 0:
                _add_cover(prs, slide, theme)
            else:
                _add_content(prs, slide, theme)

        buffer = io.BytesIO()
        prs.save(buffer)

    except Exception as e:
        logger.error(f"PPTX export failed: {e}", exc_info=True)
        raise ExportError(f"Failed to build PowerPoint file: {e}") from e

    logger.info("Exported PowerPoint file", extra={"slide_count": len(slides)})
    return buffer.getvalue()
