"""
Classification of Markdown content lines.

Deciding what a line is stays separate from cleaning it, see
``text_cleaning``.
"""

import re

from presi.domain_core.value_objects import LineKind

# "* " is a bullet, "**bold**" is not.
BULLET_RE = re.compile(r"^(?:•|-|\*(?=\s))")
SUBHEADING_RE = re.compile(r"^###")


def classify(line: str) -> LineKind:
    """Return the kind of a trimmed content line."""
    if BULLET_RE.match(line):
        return LineKind.BULLET
    if SUBHEADING_RE.match(line):
        return LineKind.SUBHEADING
    return LineKind.TEXT
