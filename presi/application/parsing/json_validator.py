"""
JSON presentation validator.

Some generator configurations answer with JSON instead of Markdown. This
path only checks the outer shape (``title`` and ``slides``) and backfills
every missing slide or element field with a fixed default.
"""

import json
import re
from typing import Any, Dict, List, Mapping, Optional

from presi.domain_core.entities import PresentationContent, Slide, SlideElement
from presi.domain_core.exceptions import InvalidShape, MalformedPayload, NoValidSlides
from presi.domain_core.value_objects import ElementType
from presi.infra.config.logging_config import get_logger

JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

DEFAULT_ELEMENT_TYPE = ElementType.CONTENT
DEFAULT_ANIMATION = "animate-fade-in"
DEFAULT_DELAY_MS = 1000


def extract_json_object(text: str) -> Dict[str, Any]:
    """Decode the outermost ``{...}`` span of ``text``."""
    match = JSON_OBJECT_RE.search(text)
    if not match:
        raise MalformedPayload("no JSON object found in response")
    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise MalformedPayload(f"invalid JSON ({exc.msg} at position {exc.pos})") from exc
    except RecursionError as exc:
        raise MalformedPayload("JSON nesting is too deep") from exc
    except ValueError as exc:
        # integer literals past the interpreter digit limit
        raise MalformedPayload(f"invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise MalformedPayload("top-level JSON value is not an object")
    return payload


def _missing(value: Any) -> bool:
    return value is None or value == ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(str(item) for item in value)
    return str(value)


def _int_or(value: Any, default: int) -> int:
    if isinstance(value, bool) or value is None:
        return default
    # 1e400 decodes to inf, which has no integer value
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


class JsonPresentationValidator:
    """Normalizes loosely structured JSON into a ``PresentationContent``."""

    def __init__(self) -> None:
        self._log = get_logger("parsing.json")

    def parse(self, text: str) -> PresentationContent:
        """Extract a JSON object from raw text and validate it."""
        return self.validate(extract_json_object(text))

    def validate(self, payload: Mapping[str, Any]) -> PresentationContent:
        """
        Validate a decoded presentation mapping.

        Raises:
            InvalidShape: ``title`` is not a non-empty string or ``slides`` is not a list
            NoValidSlides: no slide object survived normalization
        """
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            raise InvalidShape("'title' must be a non-empty string")
        raw_slides = payload.get("slides")
        if not isinstance(raw_slides, list):
            raise InvalidShape("'slides' must be an array")

        slides: List[Slide] = []
        for index, raw_slide in enumerate(raw_slides):
            if not isinstance(raw_slide, dict):
                self._log.warning("json.slide.dropped", index=index)
                continue
            slides.append(self._normalize_slide(raw_slide, index))

        if not slides:
            raise NoValidSlides(len(raw_slides))

        self._log.info("json.parse.completed", title=title, slides=len(slides))
        return PresentationContent(title=title.strip(), slides=tuple(slides))

    def _normalize_slide(self, raw: Mapping[str, Any], index: int) -> Slide:
        raw_elements = raw.get("elements")
        if not isinstance(raw_elements, list):
            raw_elements = []

        elements = [
            self._normalize_element(element, index, elem_index)
            for elem_index, element in enumerate(raw_elements)
            if isinstance(element, dict)
        ]
        if len(elements) != len(raw_elements):
            self._log.warning(
                "json.elements.dropped",
                slide_index=index,
                dropped=len(raw_elements) - len(elements),
            )

        return Slide(
            id=str(raw["id"]) if not _missing(raw.get("id")) else f"slide-{index + 1}",
            title=str(raw["title"]) if not _missing(raw.get("title")) else f"Slide {index + 1}",
            content=_text(raw.get("content")),
            elements=tuple(sorted(elements, key=lambda e: e.order)),
        )

    def _normalize_element(
        self, raw: Mapping[str, Any], slide_index: int, elem_index: int
    ) -> SlideElement:
        return SlideElement(
            id=(
                str(raw["id"])
                if not _missing(raw.get("id"))
                else f"element-{slide_index + 1}-{elem_index + 1}"
            ),
            type=self._element_type(raw.get("type")),
            content=_text(raw.get("content")),
            animation=(
                str(raw["animation"])
                if raw.get("animation") is not None
                else DEFAULT_ANIMATION
            ),
            delay=_int_or(raw.get("delay"), DEFAULT_DELAY_MS),
            order=_int_or(raw.get("order"), elem_index + 1),
        )

    def _element_type(self, value: Optional[Any]) -> ElementType:
        if _missing(value):
            return DEFAULT_ELEMENT_TYPE
        try:
            return ElementType(value)
        except ValueError:
            self._log.warning("json.element.type_coerced", type=str(value))
            return DEFAULT_ELEMENT_TYPE
