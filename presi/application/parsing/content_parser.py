"""
Entry point for turning raw generator output into a presentation.
"""

import re
from typing import Optional, Union

from presi.application.parsing.json_validator import JsonPresentationValidator
from presi.application.parsing.markdown_parser import SLIDE_HEADING_RE, MarkdownParser
from presi.domain_core.entities import PresentationContent
from presi.domain_core.exceptions import ParseError
from presi.domain_core.value_objects import InputFormat
from presi.infra.config.logging_config import excerpt, get_logger
from presi.infra.config.settings import Settings, get_settings

CODE_FENCE_RE = re.compile(r"^```[\w-]*[ \t]*\n(.*?)\n?```[ \t]*$", re.DOTALL)


def unwrap_code_fence(text: str) -> str:
    """Return the body of a response wrapped in a single Markdown code fence."""
    stripped = text.strip()
    match = CODE_FENCE_RE.match(stripped)
    return match.group(1).strip() if match else stripped


def detect_format(text: str) -> InputFormat:
    """Guess whether ``text`` is a JSON or a Markdown presentation."""
    if text.startswith("{"):
        return InputFormat.JSON
    if SLIDE_HEADING_RE.search(text):
        return InputFormat.MARKDOWN
    if "{" in text:
        return InputFormat.JSON
    return InputFormat.MARKDOWN


def parse_content_response(
    text: str,
    input_format: Union[InputFormat, str] = InputFormat.AUTO,
    settings: Optional[Settings] = None,
) -> PresentationContent:
    """
    Parse raw generator output into a ``PresentationContent``.

    Args:
        text: Raw response text (Markdown or JSON, optionally fenced)
        input_format: Force a format, or detect it with ``InputFormat.AUTO``
        settings: Optional settings override

    Returns:
        A fully validated presentation; failures raise instead of returning
        partial values.

    Raises:
        ParseError: any subclass describing why the text was unusable
    """
    settings = settings or get_settings()
    log = get_logger("parsing.content")
    body = unwrap_code_fence(text)
    requested = InputFormat(input_format)
    resolved = detect_format(body) if requested is InputFormat.AUTO else requested

    try:
        if resolved is InputFormat.JSON:
            presentation = JsonPresentationValidator().parse(body)
        else:
            presentation = MarkdownParser().parse(body)
    except ParseError as exc:
        log.warning(
            "presentation.parse.failed",
            code=exc.code,
            error=exc.message,
            input_format=resolved.value,
            raw_excerpt=excerpt(text, settings.parse_log_excerpt_chars),
        )
        raise

    log.info(
        "presentation.parse.completed",
        input_format=resolved.value,
        total_slides=presentation.total_slides,
    )
    return presentation
