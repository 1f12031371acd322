"""
Presentation domain entities.

A ``PresentationContent`` is built once per successful parse and never
mutated afterwards; slides and elements are held in tuples.
"""

from dataclasses import dataclass, field
from typing import Tuple

from presi.domain_core.value_objects import ElementType


@dataclass(frozen=True)
class SlideElement:
    id: str
    type: ElementType
    content: str
    animation: str
    delay: int
    order: int

    @property
    def is_speech(self) -> bool:
        return self.type is ElementType.SPEECH


@dataclass(frozen=True)
class Slide:
    id: str
    title: str
    content: str
    elements: Tuple[SlideElement, ...] = field(default_factory=tuple)

    def visual_elements(self) -> Tuple[SlideElement, ...]:
        """Non-speech elements in reveal order."""
        return tuple(
            sorted((e for e in self.elements if not e.is_speech), key=_by_order)
        )

    def speech_elements(self) -> Tuple[SlideElement, ...]:
        """Speech elements in playback order."""
        return tuple(sorted((e for e in self.elements if e.is_speech), key=_by_order))

    def speech_text(self) -> str:
        """Business rule: narration for a slide is its speech joined in order."""
        return " ".join(e.content for e in self.speech_elements())


@dataclass(frozen=True)
class PresentationContent:
    title: str
    slides: Tuple[Slide, ...]

    @property
    def total_slides(self) -> int:
        return len(self.slides)


def _by_order(element: SlideElement) -> int:
    return element.order
