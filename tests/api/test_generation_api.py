"""
API tests for the generation helper endpoints.
"""

from presi.application.prompts import DEFAULT_MODELS


def test_models_default_format(client):
    response = client.get("/api/v1/generation/models")

    assert response.status_code == 200
    data = response.json()
    assert data["data"] == DEFAULT_MODELS
    assert data["count"] == len(DEFAULT_MODELS)
    assert data["default"]


def test_models_select_format(client):
    response = client.get("/api/v1/generation/models", params={"format": "select"})

    assert response.status_code == 200
    first = response.json()["data"][0]
    assert first == {"value": "qwen/qwen3-8b:free", "label": "qwen / qwen3-8b - free"}


def test_prompt_markdown(client):
    response = client.get("/api/v1/generation/prompt", params={"topic": "Solar power"})

    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "markdown"
    assert data["prompt"].endswith("Topic: Solar power")


def test_prompt_json(client):
    response = client.get(
        "/api/v1/generation/prompt", params={"topic": "Solar power", "format": "json"}
    )
    assert '"slides"' in response.json()["prompt"]


def test_prompt_blank_topic(client):
    response = client.get("/api/v1/generation/prompt", params={"topic": "   "})

    assert response.status_code == 400
    assert response.json()["error"] == "HTTP_400"
