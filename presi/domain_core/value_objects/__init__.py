from .element_type import ElementType, Animation
from .line_kind import LineKind
from .input_format import InputFormat

__all__ = ["ElementType", "Animation", "LineKind", "InputFormat"]
