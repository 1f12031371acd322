"""
HTML projection of a presentation.

Visual elements become animated markup revealed in ``order``; speech
elements are kept aside for narration and drive the duration estimate.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import bleach
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from presi.domain_core.entities import PresentationContent, Slide, SlideElement
from presi.domain_core.value_objects import ElementType
from presi.infra.config.logging_config import get_logger
from presi.infra.config.settings import Settings, get_settings

HTML_TAGS = {
    ElementType.TITLE: "h1",
    ElementType.SUBTITLE: "h2",
    ElementType.CONTENT: "p",
    ElementType.BULLET_LIST: "ul",
}
DEFAULT_TAG = "div"

_env = Environment(
    loader=PackageLoader("presi", "templates"), autoescape=select_autoescape(["html"])
)


class HTMLSanitizer:
    ALLOWED_TAGS = ["strong", "b", "em", "i", "u", "code", "br", "span", "ul", "ol", "li"]
    ALLOWED_ATTRIBUTES = {"span": ["class"]}

    def sanitize(self, content: str) -> str:
        """Sanitize element content to prevent XSS attacks."""
        return bleach.clean(
            content,
            tags=self.ALLOWED_TAGS,
            attributes=self.ALLOWED_ATTRIBUTES,
            strip=True,
            strip_comments=True,
        )


@dataclass(frozen=True)
class HtmlElement:
    id: str
    type: ElementType
    content: str
    animation_class: str
    animation_delay: int
    order: int

    @property
    def tag(self) -> str:
        return HTML_TAGS.get(self.type, DEFAULT_TAG)


@dataclass(frozen=True)
class HtmlSlide:
    id: str
    title: str
    elements: Tuple[HtmlElement, ...]
    speech_elements: Tuple[HtmlElement, ...]

    def speech_text(self) -> str:
        return " ".join(e.content for e in self.speech_elements)


@dataclass(frozen=True)
class HtmlPresentation:
    title: str
    slides: Tuple[HtmlSlide, ...]
    total_elements: int
    estimated_duration: int


@dataclass(frozen=True)
class _RenderedElement:
    id: str
    tag: str
    animation_class: str
    animation_delay: int
    order: int
    markup: Markup


def format_content(element: SlideElement) -> str:
    if element.type is ElementType.BULLET_LIST and "<li" not in element.content:
        return f"<li>{element.content}</li>"
    return element.content


def estimate_reading_time(text: str, words_per_minute: int, minimum: int) -> int:
    """Seconds needed to read ``text`` aloud, rounded up."""
    words = len(text.split())
    return max(minimum, math.ceil(words * 60 / words_per_minute))


class HtmlProjector:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        sanitizer: Optional[HTMLSanitizer] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._sanitizer = sanitizer or HTMLSanitizer()
        self._log = get_logger("projection.html")

    def project(self, presentation: PresentationContent) -> HtmlPresentation:
        """Split every slide into visual and speech elements and time it."""
        slides = tuple(self._project_slide(slide) for slide in presentation.slides)
        duration = sum(
            estimate_reading_time(
                slide.speech_text(),
                self._settings.reading_words_per_minute,
                self._settings.min_clip_seconds,
            )
            for slide in slides
        )
        return HtmlPresentation(
            title=presentation.title,
            slides=slides,
            total_elements=sum(len(slide.elements) for slide in slides),
            estimated_duration=duration,
        )

    def render_slide(self, slide: HtmlSlide) -> str:
        elements = [
            _RenderedElement(
                id=element.id,
                tag=element.tag,
                animation_class=element.animation_class,
                animation_delay=element.animation_delay,
                order=element.order,
                markup=Markup(self._sanitizer.sanitize(element.content)),
            )
            for element in slide.elements
        ]
        return _env.get_template("slide.html").render(slide=slide, elements=elements)

    def render_document(self, presentation: HtmlPresentation) -> str:
        slides_html = [Markup(self.render_slide(slide)) for slide in presentation.slides]
        html = _env.get_template("presentation.html").render(
            presentation=presentation,
            slides_html=slides_html,
            lang=self._settings.html_lang,
            dir=self._settings.html_dir,
        )
        self._log.info(
            "html.rendered",
            slides=len(presentation.slides),
            total_elements=presentation.total_elements,
        )
        return html

    def _project_slide(self, slide: Slide) -> HtmlSlide:
        visual: List[HtmlElement] = []
        speech: List[HtmlElement] = []
        for element in slide.elements:
            if element.is_speech:
                speech.append(
                    HtmlElement(
                        id=element.id,
                        type=element.type,
                        content=element.content,
                        animation_class="",
                        animation_delay=0,
                        order=element.order,
                    )
                )
            else:
                visual.append(
                    HtmlElement(
                        id=element.id,
                        type=element.type,
                        content=format_content(element),
                        animation_class=element.animation,
                        animation_delay=element.delay,
                        order=element.order,
                    )
                )

        return HtmlSlide(
            id=slide.id,
            title=slide.title,
            elements=tuple(sorted(visual, key=lambda e: e.order)),
            speech_elements=tuple(sorted(speech, key=lambda e: e.order)),
        )
