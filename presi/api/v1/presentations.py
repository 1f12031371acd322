"""
Presentation parsing and projection endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from presi.api.dependencies import get_html_projector
from presi.api.schemas import (
    HtmlProjectionResponse,
    ParseRequest,
    PresentationOut,
    SpeechResponse,
    SpeechSegmentOut,
    presentation_out,
)
from presi.application.parsing import parse_content_response
from presi.application.projection import HtmlProjector, extract_speech, total_duration
from presi.domain_core.entities import PresentationContent
from presi.infra.config.logging_config import bind_context, get_logger
from presi.infra.config.settings import Settings, get_settings

router = APIRouter(prefix="/presentations", tags=["presentations"])
log = get_logger("api.presentations")


def _parse_request(req: ParseRequest, settings: Settings) -> PresentationContent:
    if len(req.content) > settings.max_input_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Content exceeds {settings.max_input_chars} characters",
        )
    bind_context(input_format=req.input_format.value)
    return parse_content_response(req.content, req.input_format, settings=settings)


@router.post("/parse", response_model=PresentationOut)
async def parse_presentation(
    req: ParseRequest, settings: Settings = Depends(get_settings)
) -> PresentationOut:
    """
    Parse raw generator output into a presentation.

    Failures are reported as 422 with the error code; no partial
    presentation is ever returned.
    """
    presentation = _parse_request(req, settings)
    return presentation_out(presentation)


@router.post("/html", response_model=HtmlProjectionResponse)
async def render_presentation_html(
    req: ParseRequest,
    settings: Settings = Depends(get_settings),
    projector: HtmlProjector = Depends(get_html_projector),
) -> HtmlProjectionResponse:
    """Parse and render the presentation as an animated HTML document."""
    html_presentation = projector.project(_parse_request(req, settings))
    return HtmlProjectionResponse(
        title=html_presentation.title,
        html=projector.render_document(html_presentation),
        total_elements=html_presentation.total_elements,
        estimated_duration=html_presentation.estimated_duration,
    )


@router.post("/speech", response_model=SpeechResponse)
async def extract_presentation_speech(
    req: ParseRequest, settings: Settings = Depends(get_settings)
) -> SpeechResponse:
    """Parse and return the per-slide narration a TTS batch would render."""
    presentation = _parse_request(req, settings)
    segments = extract_speech(presentation, settings=settings)
    log.info("speech.extracted", segments=len(segments))
    return SpeechResponse(
        title=presentation.title,
        segments=[
            SpeechSegmentOut(
                slide_id=segment.slide_id,
                text=segment.text,
                clip_name=segment.clip_name,
                estimated_duration=segment.estimated_duration,
            )
            for segment in segments
        ],
        total_duration=total_duration(segments),
    )
