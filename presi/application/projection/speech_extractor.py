"""
Narration extraction for the text-to-speech batch step.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from presi.domain_core.entities import PresentationContent
from presi.infra.config.settings import Settings, get_settings


@dataclass(frozen=True)
class SpeechSegment:
    slide_id: str
    text: str
    clip_name: str
    estimated_duration: float


def estimate_speech_duration(text: str, words_per_minute: int, minimum: float) -> float:
    words = len(text.split())
    return max(float(minimum), words * 60 / words_per_minute)


def extract_speech(
    presentation: PresentationContent, settings: Optional[Settings] = None
) -> List[SpeechSegment]:
    """One narration segment per slide that has any speech text."""
    settings = settings or get_settings()
    segments = []
    for position, slide in enumerate(presentation.slides, start=1):
        text = slide.speech_text().strip()
        if not text:
            continue
        segments.append(
            SpeechSegment(
                slide_id=slide.id,
                text=text,
                clip_name=f"slide-{position}.wav",
                estimated_duration=estimate_speech_duration(
                    text, settings.speech_words_per_minute, settings.min_clip_seconds
                ),
            )
        )
    return segments


def total_duration(segments: Iterable[SpeechSegment]) -> float:
    return sum(segment.estimated_duration for segment in segments)
