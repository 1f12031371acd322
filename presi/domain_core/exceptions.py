"""
Domain exceptions.

Every error carries a stable ``code`` so the API layer can map it to an
HTTP status without inspecting messages.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ParseError(DomainError):
    """Raised when generator output cannot be turned into a presentation."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        super().__init__(message, code)


class StructureNotFound(ParseError):
    """Raised when Markdown input has no level-2 slide headings."""

    def __init__(self, reason: str = "no slide headings found"):
        super().__init__(
            f"Content is not in the expected structure: {reason}",
            "STRUCTURE_NOT_FOUND",
        )


class NoValidSlides(ParseError):
    """Raised when slide blocks exist but none of them could be parsed."""

    def __init__(self, block_count: int = 0):
        super().__init__(
            f"None of the {block_count} slide blocks could be parsed",
            "NO_VALID_SLIDES",
        )
        self.block_count = block_count


class InvalidShape(ParseError):
    """Raised when a JSON presentation lacks a usable title or slides list."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid presentation shape: {reason}", "INVALID_SHAPE")
        self.reason = reason


class MalformedPayload(ParseError):
    """Raised when no JSON object can be extracted or decoded."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed presentation payload: {reason}", "MALFORMED_PAYLOAD")
        self.reason = reason


class InvalidAudioFormat(DomainError):
    """Raised when an audio MIME type cannot describe PCM data."""

    def __init__(self, mime_type: str, reason: str):
        super().__init__(
            f"Unsupported audio format {mime_type!r}: {reason}", "INVALID_AUDIO_FORMAT"
        )
        self.mime_type = mime_type
