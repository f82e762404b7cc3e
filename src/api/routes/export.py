"""Export endpoints for the HTML presentation, zip bundle and PPTX file.

Rendering runs in a worker thread via asyncio.to_thread so large decks do not
block the event loop.
"""

import asyncio
import logging
from typing import NoReturn

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from src.api.models.requests import ScriptRequest
from src.api.routes.script import parse_request
from src.config.settings import get_settings
from src.services.packager import build_bundle
from src.services.pptx_export import export_pptx
from src.services.theme import PresentationTheme
from src.utils.error_handling import EmptyScriptError, ExportError, format_exception_for_logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/export", tags=["export"])

ZIP_MEDIA_TYPE = "application/zip"
PPTX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


def _attachment_headers(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


def _raise_http(e: Exception, export_type: str) -> NoReturn:
    """Translate service errors into HTTP errors."""
    if isinstance(e, EmptyScriptError):
        raise HTTPException(status_code=422, detail=e.message) from e
    if isinstance(e, ExportError):
        logger.error(
            f"{export_type} export failed",
            extra=format_exception_for_logging(e),
        )
        raise HTTPException(status_code=500, detail=e.message) from e
    logger.error(f"{export_type} export failed: {e}", exc_info=True)
    raise HTTPException(status_code=500, detail=f"{export_type} export failed: {e}") from e


@router.post("/html", response_class=HTMLResponse)
async def export_html(request: ScriptRequest):
    """Render only the presentation document.

    Chart slides reference chart pages by file name; use the zip export to
    get those pages too.
    """
    slides = parse_request(request)
    settings = get_settings()

    try:
        bundle = await asyncio.to_thread(
            build_bundle,
            slides,
            settings.output,
            PresentationTheme.from_settings(settings.theme),
        )
    except Exception as e:
        _raise_http(e, "HTML")

    presentation = bundle.get(settings.output.presentation_filename)
    return HTMLResponse(content=presentation.content)


@router.post("/zip")
async def export_zip(request: ScriptRequest):
    """Build the presentation, chart pages and README as a zip download."""
    slides = parse_request(request)
    settings = get_settings()

    try:
        bundle = await asyncio.to_thread(
            build_bundle,
            slides,
            settings.output,
            PresentationTheme.from_settings(settings.theme),
        )
        content = await asyncio.to_thread(bundle.to_zip_bytes)
    except Exception as e:
        _raise_http(e, "Zip")

    logger.info(
        "Zip export completed",
        extra={"slide_count": len(slides), "files": bundle.file_names},
    )
    return Response(
        content=content,
        media_type=ZIP_MEDIA_TYPE,
        headers=_attachment_headers(bundle.archive_name),
    )


@router.post("/pptx")
async def export_pptx_file(request: ScriptRequest):
    """Build a PowerPoint file from the script."""
    slides = parse_request(request)
    settings = get_settings()

    try:
        content = await asyncio.to_thread(
            export_pptx,
            slides,
            PresentationTheme.from_settings(settings.theme),
        )
    except Exception as e:
        _raise_http(e, "PPTX")

    logger.info("PPTX export completed", extra={"slide_count": len(slides)})
    return Response(
        content=content,
        media_type=PPTX_MEDIA_TYPE,
        headers=_attachment_headers(settings.output.pptx_filename),
    )
