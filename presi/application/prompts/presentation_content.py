"""
Presentation content generation prompts and fallback models.
"""

from typing import Dict, List, Sequence

from presi.domain_core.value_objects import InputFormat

# Free OpenRouter models tried in order when the requested model fails.
DEFAULT_MODELS: List[str] = [
    "qwen/qwen3-8b:free",
    "deepseek/deepseek-r1-0528:free",
    "meta-llama/llama-3.2-3b-instruct:free",
    "microsoft/phi-3-mini-128k-instruct:free",
    "huggingface/zephyr-7b-beta:free",
]


def format_model_options(models: Sequence[str]) -> List[Dict[str, str]]:
    """Turn model ids into ``{value, label}`` pairs for a dropdown."""
    return [
        {"value": model, "label": model.replace(":", " - ").replace("/", " / ")}
        for model in models
    ]


class PresentationContentPrompts:
    """Centralized prompt templates for presentation content generation."""

    MARKDOWN_PROMPT = """
You are an expert presentation content creator. Create an engaging, well-structured
presentation about the user's topic, written in Markdown with this exact layout:

# Presentation title

## First slide title
- A short bullet point
### An optional subtitle
A sentence of supporting content
**Speech:** Narration introducing the slide
Narration for the first content line
Narration for the second content line

Guidelines:
1. Create 5-8 slides, each starting with a "## " heading
2. Use 2-4 content lines per slide: bullets ("- "), subtitles ("### ") or plain sentences
3. After the content, write "**Speech:**" followed by one narration line for the
   slide title and then one narration line per content line, in the same order
4. Keep narration natural and conversational; do not repeat the bullet text verbatim
5. Do not wrap the answer in code fences and do not add any other text

Topic: """

    JSON_PROMPT = """
You are an expert presentation content creator. Create an engaging, well-structured
presentation about the user's topic in the following JSON format:

{
  "title": "Main presentation title",
  "slides": [
    {
      "id": "slide-1",
      "title": "Slide title",
      "content": "Brief slide summary",
      "elements": [
        {"id": "element-1", "type": "title", "content": "Main slide title",
         "animation": "animate-fade-in", "delay": 1000, "order": 1},
        {"id": "element-2", "type": "speech", "content": "Narration for the title",
         "animation": "", "delay": 0, "order": 2}
      ]
    }
  ]
}

Guidelines:
1. Create 5-8 slides maximum, each with 3-6 elements
2. Use element types: title, subtitle, content, bullet-list, bullet-point, speech
3. Available animations: animate-fade-in, animate-slide-in-left, animate-slide-in-right,
   animate-scale-up, animate-bounce-in
4. Delays are in milliseconds; speech elements use 0
5. Follow every visual element with a speech element narrating it
6. Order elements 1, 2, 3, ... within each slide

Topic: """

    @classmethod
    def build(cls, topic: str, output_format: InputFormat = InputFormat.MARKDOWN) -> str:
        """Return the system prompt for ``topic`` in the requested output format."""
        if not topic or not topic.strip():
            raise ValueError("Presentation topic cannot be empty")
        template = (
            cls.JSON_PROMPT if output_format is InputFormat.JSON else cls.MARKDOWN_PROMPT
        )
        return template.lstrip("\n") + topic.strip()
