"""
Slide element type and animation value objects.
"""

from enum import Enum


class ElementType(str, Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    CONTENT = "content"
    BULLET_LIST = "bullet-list"
    BULLET_POINT = "bullet-point"
    SPEECH = "speech"

    @property
    def is_visual(self) -> bool:
        return self is not ElementType.SPEECH


class Animation(str, Enum):
    FADE_IN = "fade-in"
    SLIDE_IN_LEFT = "slide-in-left"
    SLIDE_IN_RIGHT = "slide-in-right"
    SCALE_UP = "scale-up"
    BOUNCE_IN = "bounce-in"
    NONE = ""
