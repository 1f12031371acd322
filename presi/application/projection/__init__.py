"""Pure projections of a parsed presentation for rendering and narration."""

from .html_projector import HtmlElement, HtmlPresentation, HtmlProjector, HtmlSlide
from .speech_extractor import SpeechSegment, extract_speech, total_duration

__all__ = [
    "HtmlElement",
    "HtmlPresentation",
    "HtmlProjector",
    "HtmlSlide",
    "SpeechSegment",
    "extract_speech",
    "total_duration",
]
