"""
Generation helper schemas (prompt templates and fallback models).
"""

from __future__ import annotations

from typing import List, Union

from .base import CamelModel


class ModelOption(CamelModel):
    value: str
    label: str


class ModelsResponse(CamelModel):
    data: Union[List[ModelOption], List[str]]
    count: int
    default: str


class PromptResponse(CamelModel):
    topic: str
    format: str
    prompt: str
