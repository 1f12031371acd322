"""
Raw generator output formats.
"""

from enum import Enum


class InputFormat(str, Enum):
    AUTO = "auto"
    MARKDOWN = "markdown"
    JSON = "json"
