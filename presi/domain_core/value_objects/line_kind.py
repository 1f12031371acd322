"""
Line kind value object for Markdown content lines.
"""

from enum import Enum

from .element_type import Animation, ElementType


class LineKind(str, Enum):
    BULLET = "bullet"
    SUBHEADING = "subheading"
    TEXT = "text"

    @property
    def element_type(self) -> ElementType:
        return _ELEMENT_TYPES[self]

    @property
    def animation(self) -> Animation:
        return _ANIMATIONS[self]


_ELEMENT_TYPES = {
    LineKind.BULLET: ElementType.BULLET_POINT,
    LineKind.SUBHEADING: ElementType.SUBTITLE,
    LineKind.TEXT: ElementType.CONTENT,
}

_ANIMATIONS = {
    LineKind.BULLET: Animation.SCALE_UP,
    LineKind.SUBHEADING: Animation.SLIDE_IN_RIGHT,
    LineKind.TEXT: Animation.SLIDE_IN_LEFT,
}
