"""
Removal of Markdown syntax from titles, content and narration.
"""

import re

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")
CODE_RE = re.compile(r"`(.*?)`")
HEADER_RE = re.compile(r"^#{1,6}\s*")
BULLET_MARKER_RE = re.compile(r"^(?:•|-|\*(?=\s))\s*")


def strip_formatting(text: str) -> str:
    """Replace bold, italic and inline code wrappers with their inner text."""
    text = BOLD_RE.sub(r"\1", text)
    text = ITALIC_RE.sub(r"\1", text)
    text = CODE_RE.sub(r"\1", text)
    return text.strip()


def clean_line(line: str) -> str:
    """Strip a leading header or bullet marker, then inline formatting."""
    line = HEADER_RE.sub("", line)
    line = BULLET_MARKER_RE.sub("", line)
    return strip_formatting(line)
