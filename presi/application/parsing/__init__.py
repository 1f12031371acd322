"""
Parsing of raw generator output into presentation values.

Usage:
    from presi.application.parsing import parse_content_response
    presentation = parse_content_response(llm_text)
"""

from .content_parser import parse_content_response
from .json_validator import JsonPresentationValidator
from .line_classifier import classify
from .markdown_parser import MarkdownParser
from .text_cleaning import clean_line, strip_formatting

__all__ = [
    "parse_content_response",
    "JsonPresentationValidator",
    "MarkdownParser",
    "classify",
    "clean_line",
    "strip_formatting",
]
