"""
Pytest configuration and fixtures.
"""

import json

import pytest
from fastapi.testclient import TestClient

from presi.infra.config.settings import Settings


@pytest.fixture
def settings():
    """Settings with defaults only, independent of any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def healthcare_markdown():
    """Generator output with three slides and partial narration."""
    return """# AI in Healthcare

## Introduction
- Better diagnostics
- Faster triage
**Speech:** Welcome to our talk on AI in healthcare.
Diagnostics improve when models assist radiologists.

## Challenges
### Data privacy
Models need **large** datasets
**Narrator:** Let's talk about what is still hard.

## Thank You
"""


@pytest.fixture
def sample_json_payload():
    return {
        "title": "AI-Powered Presentation Generation",
        "slides": [
            {
                "id": "slide-1",
                "title": "Welcome",
                "content": "Introduction",
                "elements": [
                    {
                        "id": "element-1-2",
                        "type": "speech",
                        "content": "Welcome to our presentation.",
                        "animation": "",
                        "delay": 0,
                        "order": 2,
                    },
                    {
                        "id": "element-1-1",
                        "type": "title",
                        "content": "AI-Powered Presentation Generation",
                        "animation": "animate-fade-in",
                        "delay": 1000,
                        "order": 1,
                    },
                ],
            },
            {"title": "Key Benefits", "elements": [{"content": "Saves time"}]},
        ],
    }


@pytest.fixture
def sample_json_text(sample_json_payload):
    return "Here is your presentation:\n```json\n" + json.dumps(sample_json_payload) + "\n```"


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app():
    """FastAPI application instance for testing."""
    from presi.main import app

    return app


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
