"""Script parsing endpoints.

Parsing is pure and fast, so these handlers call the parser directly.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from src.api.models.requests import ScriptRequest
from src.api.models.responses import NormalizeResponse, ParseResponse, SlideResponse
from src.config.settings import get_settings
from src.domain.slide import Slide
from src.services.script_parser import parse_script
from src.services.script_serializer import serialize_script
from src.utils.error_handling import NO_SLIDES_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/script", tags=["script"])


def parse_request(request: ScriptRequest) -> List[Slide]:
    """Parse the script in a request after enforcing the size limit.

    Raises:
        HTTPException: 413 if the script exceeds ``api.max_script_length``
    """
    max_length = get_settings().api.max_script_length
    if len(request.script) > max_length:
        raise HTTPException(
            status_code=413,
            detail=f"Script is too long ({len(request.script)} characters, limit {max_length})",
        )
    return parse_script(request.script)


@router.post("/parse", response_model=ParseResponse)
async def parse(request: ScriptRequest) -> ParseResponse:
    """Parse a script into slides.

    An input with no slides is not an error; the response carries a guidance
    message instead.
    """
    slides = parse_request(request)

    logger.info(
        "Parsed script",
        extra={"slide_count": len(slides), "script_length": len(request.script)},
    )

    return ParseResponse(
        slides=[SlideResponse.from_slide(slide) for slide in slides],
        slide_count=len(slides),
        message=None if slides else NO_SLIDES_MESSAGE,
    )


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(request: ScriptRequest) -> NormalizeResponse:
    """Rewrite a script using the canonical English keywords."""
    slides = parse_request(request)
    return NormalizeResponse(script=serialize_script(slides), slide_count=len(slides))
