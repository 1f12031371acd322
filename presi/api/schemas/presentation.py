"""
Presentation parsing and projection schemas.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from presi.domain_core.value_objects import ElementType, InputFormat

from .base import CamelModel


# ---------- REQUEST SCHEMAS ----------
class ParseRequest(CamelModel):
    """Raw generator output to be parsed."""

    content: str = Field(
        ..., min_length=1, description="Markdown or JSON text, up to MAX_INPUT_CHARS"
    )
    input_format: InputFormat = Field(
        InputFormat.AUTO, alias="format", description="auto|markdown|json"
    )


# ---------- PRESENTATION OUTPUT SCHEMAS ----------
class SlideElementOut(CamelModel):
    id: str
    type: ElementType
    content: str
    animation: str
    delay: int
    order: int


class SlideOut(CamelModel):
    id: str
    title: str
    content: str
    elements: List[SlideElementOut]


class PresentationOut(CamelModel):
    """
    Parsed presentation.

    ``totalSlides`` always equals the number of slides.
    """

    title: str
    slides: List[SlideOut]
    total_slides: int


# ---------- PROJECTION SCHEMAS ----------
class HtmlProjectionResponse(CamelModel):
    title: str
    html: str
    total_elements: int
    estimated_duration: int = Field(..., description="Seconds")


class SpeechSegmentOut(CamelModel):
    slide_id: str
    text: str
    clip_name: str
    estimated_duration: float = Field(..., description="Seconds")


class SpeechResponse(CamelModel):
    title: str
    segments: List[SpeechSegmentOut]
    total_duration: float


def presentation_out(presentation) -> PresentationOut:
    """Build the response model from a ``PresentationContent``."""
    return PresentationOut(
        title=presentation.title,
        total_slides=presentation.total_slides,
        slides=[
            SlideOut(
                id=slide.id,
                title=slide.title,
                content=slide.content,
                elements=[
                    SlideElementOut(
                        id=element.id,
                        type=element.type,
                        content=element.content,
                        animation=element.animation,
                        delay=element.delay,
                        order=element.order,
                    )
                    for element in slide.elements
                ],
            )
            for slide in presentation.slides
        ],
    )
