"""
Application-layer prompts for the upstream content generator.

The generator call itself lives outside this service; these templates and
the fallback model list are what it sends and retries against.
"""

from .presentation_content import (
    DEFAULT_MODELS,
    PresentationContentPrompts,
    format_model_options,
)

__all__ = ["DEFAULT_MODELS", "PresentationContentPrompts", "format_model_options"]
