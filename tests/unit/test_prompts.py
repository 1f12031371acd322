"""
Unit tests for generation prompts and fallback models.
"""

import pytest

from presi.application.prompts import (
    DEFAULT_MODELS,
    PresentationContentPrompts,
    format_model_options,
)
from presi.domain_core.value_objects import InputFormat


class TestPresentationContentPrompts:
    def test_markdown_prompt_ends_with_topic(self):
        prompt = PresentationContentPrompts.build("  Solar power ")
        assert prompt.endswith("Topic: Solar power")
        assert "**Speech:**" in prompt

    def test_json_prompt(self):
        prompt = PresentationContentPrompts.build("Solar power", InputFormat.JSON)
        assert '"slides"' in prompt
        assert prompt.endswith("Topic: Solar power")

    def test_empty_topic_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            PresentationContentPrompts.build("   ")


class TestModels:
    def test_default_models_are_free_tier(self):
        assert DEFAULT_MODELS[0] == "qwen/qwen3-8b:free"
        assert all(model.endswith(":free") for model in DEFAULT_MODELS)

    def test_format_model_options(self):
        assert format_model_options(["qwen/qwen3-8b:free"]) == [
            {"value": "qwen/qwen3-8b:free", "label": "qwen / qwen3-8b - free"}
        ]
