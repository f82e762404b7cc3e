"""Response models for the API."""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.slide import Slide


class GraphResponse(BaseModel):
    """Chart series of one slide."""

    labels: List[str] = Field(default_factory=list)
    values: List[float] = Field(default_factory=list)


class SlideResponse(BaseModel):
    """One parsed slide.

    ``graph`` is null when the slide had no data line, and an object with
    possibly empty lists when it had one.
    """

    title: str = ""
    content: List[str] = Field(default_factory=list)
    graph: Optional[GraphResponse] = None
    description: str = ""
    attachments: List[str] = Field(default_factory=list)

    @classmethod
    def from_slide(cls, slide: Slide) -> "SlideResponse":
        return cls.model_validate(slide.to_dict())


class ParseResponse(BaseModel):
    """Response from the parse endpoint.

    Attributes:
        slides: Parsed slides in script order
        slide_count: Number of slides
        message: Guidance when no slides were detected
    """

    slides: List[SlideResponse] = Field(..., description="Parsed slides")
    slide_count: int = Field(..., description="Number of slides", ge=0)
    message: Optional[str] = Field(
        default=None,
        description="Usage guidance, set when no slides were detected",
    )


class NormalizeResponse(BaseModel):
    """Script rewritten with canonical keywords."""

    script: str
    slide_count: int = Field(..., ge=0)
