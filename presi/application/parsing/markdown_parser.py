"""
Markdown presentation parser.

Expected layout of generator output::

    # Presentation title

    ## Slide title
    - A bullet
    ### A subtitle
    Plain content
    **Speech:** Narration for the slide title
    Narration for the bullet
    Narration for the subtitle

Lines after the first ``**Speech:**`` (or ``**Narrator:**``) marker are
narration. Narration is paired with visual lines by position: entry 0
belongs to the slide title and entry ``i + 1`` to content line ``i``.
Missing narration is synthesized from the visual text.
"""

import re
from dataclasses import dataclass
from functools import reduce
from typing import Iterator, List, Optional, Sequence, Tuple

from presi.application.parsing.line_classifier import classify
from presi.application.parsing.text_cleaning import clean_line, strip_formatting
from presi.domain_core.entities import PresentationContent, Slide, SlideElement
from presi.domain_core.exceptions import NoValidSlides, StructureNotFound
from presi.domain_core.value_objects import Animation, ElementType
from presi.infra.config.logging_config import get_logger

TITLE_RE = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
SLIDE_HEADING_RE = re.compile(r"^##[ \t]+", re.MULTILINE)
SPEECH_MARKER_RE = re.compile(r"\*\*(?:speech|narrator):\*\*(.*)", re.IGNORECASE)

DEFAULT_TITLE = "Untitled Presentation"
VISUAL_DELAY_MS = 1000
SPEECH_DELAY_MS = 0


@dataclass(frozen=True)
class SlideSections:
    """Lines of one slide, split at the first speech marker."""

    content: Tuple[str, ...]
    speech: Tuple[str, ...]


@dataclass(frozen=True)
class _ElementPair:
    visual_id: str
    speech_id: str
    type: ElementType
    animation: Animation
    content: str
    narration: str


def extract_title(markdown_text: str) -> str:
    match = TITLE_RE.search(markdown_text)
    if not match:
        return DEFAULT_TITLE
    return match.group(1).strip() or DEFAULT_TITLE


def split_into_slides(markdown_text: str) -> List[str]:
    """Return raw slide blocks, each starting with its heading text.

    Text before the first level-2 heading is not a slide.
    """
    without_title = TITLE_RE.sub("", markdown_text, count=1)
    fragments = SLIDE_HEADING_RE.split(without_title)
    return [block for block in fragments[1:] if block.strip()]


def split_sections(lines: Sequence[str]) -> SlideSections:
    content: List[str] = []
    speech: List[str] = []
    in_speech = False

    for line in lines:
        marker = SPEECH_MARKER_RE.search(line)
        if marker:
            in_speech = True
            trailing = marker.group(1).strip()
            if trailing:
                speech.append(trailing)
            continue
        (speech if in_speech else content).append(line)

    return SlideSections(content=tuple(content), speech=tuple(speech))


def default_narration(content: str, element_type: ElementType) -> str:
    if element_type is ElementType.TITLE:
        return f"Welcome to {content}"
    if element_type is ElementType.BULLET_POINT:
        return f"Let's examine this point: {content}"
    if element_type is ElementType.SUBTITLE:
        return f"Now we'll focus on {content}"
    return content


def _narration(
    speech: Sequence[str], index: int, content: str, element_type: ElementType
) -> str:
    raw = speech[index] if index < len(speech) else ""
    return strip_formatting(raw) or default_narration(content, element_type)


def _element_pairs(
    slide_id: str, title: str, sections: SlideSections
) -> Iterator[_ElementPair]:
    yield _ElementPair(
        visual_id=f"{slide_id}-title",
        speech_id=f"{slide_id}-title-speech",
        type=ElementType.TITLE,
        animation=Animation.FADE_IN,
        content=title,
        narration=_narration(sections.speech, 0, title, ElementType.TITLE),
    )

    for i, line in enumerate(sections.content):
        content = clean_line(line)
        if not content:
            continue
        kind = classify(line)
        yield _ElementPair(
            visual_id=f"{slide_id}-content-{i}",
            speech_id=f"{slide_id}-speech-{i}",
            type=kind.element_type,
            animation=kind.animation,
            content=content,
            narration=_narration(sections.speech, i + 1, content, kind.element_type),
        )


def _append_pair(
    state: Tuple[Tuple[SlideElement, ...], int], pair: _ElementPair
) -> Tuple[Tuple[SlideElement, ...], int]:
    elements, order = state
    visual = SlideElement(
        id=pair.visual_id,
        type=pair.type,
        content=pair.content,
        animation=pair.animation.value,
        delay=VISUAL_DELAY_MS,
        order=order,
    )
    speech = SlideElement(
        id=pair.speech_id,
        type=ElementType.SPEECH,
        content=pair.narration,
        animation=Animation.NONE.value,
        delay=SPEECH_DELAY_MS,
        order=order + 1,
    )
    return elements + (visual, speech), order + 2


def build_elements(
    slide_id: str, title: str, sections: SlideSections
) -> Tuple[SlideElement, ...]:
    """Fold element pairs into a tuple, threading the order counter from 1."""
    elements, _ = reduce(_append_pair, _element_pairs(slide_id, title, sections), ((), 1))
    return elements


class MarkdownParser:
    """Parses Markdown generator output into a ``PresentationContent``."""

    def __init__(self) -> None:
        self._log = get_logger("parsing.markdown")

    def parse(self, markdown_text: str) -> PresentationContent:
        """
        Parse a Markdown presentation.

        Raises:
            StructureNotFound: no level-2 slide headings in the text
            NoValidSlides: slide blocks exist but none is usable
        """
        title = extract_title(markdown_text)
        blocks = split_into_slides(markdown_text)
        if not blocks:
            raise StructureNotFound()

        parsed = (self._parse_slide(block, index) for index, block in enumerate(blocks))
        slides = [slide for slide in parsed if slide is not None]
        if not slides:
            raise NoValidSlides(len(blocks))

        self._log.info(
            "markdown.parse.completed",
            title=title,
            slides=len(slides),
            skipped=len(blocks) - len(slides),
        )
        return PresentationContent(title=title, slides=tuple(slides))

    def _parse_slide(self, block: str, index: int) -> Optional[Slide]:
        lines = [line.strip() for line in block.splitlines() if line.strip()]
        slide_id = f"slide-{index}"
        title = strip_formatting(lines[0]) if lines else ""
        if not title:
            self._log.warning("markdown.slide.skipped", slide_id=slide_id)
            return None

        sections = split_sections(lines[1:])
        return Slide(
            id=slide_id,
            title=title,
            content=" ".join(sections.content),
            elements=build_elements(slide_id, title, sections),
        )
