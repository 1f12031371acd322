"""
Unit tests for the JSON presentation validator.
"""

import pytest

from presi.application.parsing.json_validator import (
    JsonPresentationValidator,
    extract_json_object,
)
from presi.domain_core.exceptions import InvalidShape, MalformedPayload, NoValidSlides
from presi.domain_core.value_objects import ElementType


@pytest.fixture
def validator():
    return JsonPresentationValidator()


class TestExtractJsonObject:
    def test_extracts_object_from_surrounding_text(self):
        assert extract_json_object('Sure! {"title": "T", "slides": []} Enjoy.') == {
            "title": "T",
            "slides": [],
        }

    def test_no_object_raises(self):
        with pytest.raises(MalformedPayload, match="no JSON object"):
            extract_json_object("no braces here")

    def test_invalid_json_raises(self):
        with pytest.raises(MalformedPayload, match="invalid JSON"):
            extract_json_object('{"title": "T", "slides": [}')

    def test_deep_nesting_raises(self):
        depth = 100_000
        with pytest.raises(MalformedPayload, match="too deep"):
            extract_json_object('{"title": ' + "[" * depth + "]" * depth + "}")

    def test_oversized_integer_literal_raises(self):
        with pytest.raises(MalformedPayload, match="invalid JSON"):
            extract_json_object('{"title": ' + "9" * 5000 + "}")


class TestValidate:
    def test_valid_payload(self, validator, sample_json_payload):
        result = validator.validate(sample_json_payload)
        assert result.title == "AI-Powered Presentation Generation"
        assert result.total_slides == 2

        first = result.slides[0]
        assert first.id == "slide-1"
        assert [e.id for e in first.elements] == ["element-1-1", "element-1-2"]
        assert first.elements[1].delay == 0
        assert first.elements[1].animation == ""

    def test_backfills_slide_and_element_defaults(self, validator, sample_json_payload):
        second = validator.validate(sample_json_payload).slides[1]
        assert second.id == "slide-2"
        assert second.title == "Key Benefits"
        assert second.content == ""

        (element,) = second.elements
        assert element.id == "element-2-1"
        assert element.type is ElementType.CONTENT
        assert element.content == "Saves time"
        assert element.animation == "animate-fade-in"
        assert element.delay == 1000
        assert element.order == 1

    def test_missing_slide_title_and_elements(self, validator):
        result = validator.validate({"title": "T", "slides": [{"elements": "oops"}]})
        slide = result.slides[0]
        assert slide.title == "Slide 1"
        assert slide.elements == ()

    def test_unknown_type_is_coerced(self, validator):
        result = validator.validate(
            {"title": "T", "slides": [{"elements": [{"type": "image", "content": "x"}]}]}
        )
        assert result.slides[0].elements[0].type is ElementType.CONTENT

    def test_list_content_is_joined(self, validator):
        result = validator.validate(
            {"title": "T", "slides": [{"elements": [{"type": "bullet-list", "content": ["a", "b"]}]}]}
        )
        assert result.slides[0].elements[0].content == "a\nb"

    def test_non_object_slides_and_elements_are_dropped(self, validator):
        result = validator.validate(
            {"title": "T", "slides": ["junk", {"title": "Kept", "elements": [1, {"content": "c"}]}]}
        )
        assert [s.title for s in result.slides] == ["Kept"]
        assert len(result.slides[0].elements) == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"slides": []},
            {"title": 42, "slides": []},
            {"title": "", "slides": []},
        ],
    )
    def test_bad_title_raises(self, validator, payload):
        with pytest.raises(InvalidShape, match="title"):
            validator.validate(payload)

    @pytest.mark.parametrize("payload", [{"title": "T"}, {"title": "T", "slides": {}}])
    def test_bad_slides_raises(self, validator, payload):
        with pytest.raises(InvalidShape, match="slides"):
            validator.validate(payload)

    def test_empty_slides_raises(self, validator):
        with pytest.raises(NoValidSlides):
            validator.validate({"title": "T", "slides": []})

    def test_parse_from_text(self, validator, sample_json_text):
        assert validator.parse(sample_json_text).total_slides == 2

    @pytest.mark.parametrize("number", ["1e400", "-1e400", "Infinity", "NaN"])
    def test_non_finite_numbers_fall_back_to_defaults(self, validator, number):
        text = (
            '{"title": "T", "slides": [{"elements": ['
            '{"content": "a", "delay": %s, "order": %s}]}]}' % (number, number)
        )
        (element,) = validator.parse(text).slides[0].elements
        assert element.delay == 1000
        assert element.order == 1

    def test_fractional_numbers_are_truncated(self, validator):
        result = validator.validate(
            {"title": "T", "slides": [{"elements": [{"delay": 250.9, "order": "3"}]}]}
        )
        element = result.slides[0].elements[0]
        assert element.delay == 250
        assert element.order == 3
