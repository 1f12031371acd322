"""
API schemas.

Usage:
    from presi.api.schemas import ParseRequest, PresentationOut
    from presi.api.schemas.base import ErrorResponse
"""

from __future__ import annotations

from .base import CamelModel, ErrorResponse, HealthResponse
from .presentation import (
    HtmlProjectionResponse,
    ParseRequest,
    PresentationOut,
    SlideElementOut,
    SlideOut,
    SpeechResponse,
    SpeechSegmentOut,
    presentation_out,
)
from .generation import ModelOption, ModelsResponse, PromptResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "HtmlProjectionResponse",
    "ParseRequest",
    "PresentationOut",
    "SlideElementOut",
    "SlideOut",
    "SpeechResponse",
    "SpeechSegmentOut",
    "presentation_out",
    "ModelOption",
    "ModelsResponse",
    "PromptResponse",
]
