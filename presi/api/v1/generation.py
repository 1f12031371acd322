"""
Generation helper endpoints: prompt templates and fallback models.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from presi.api.schemas import ModelOption, ModelsResponse, PromptResponse
from presi.application.prompts import (
    DEFAULT_MODELS,
    PresentationContentPrompts,
    format_model_options,
)
from presi.domain_core.value_objects import InputFormat
from presi.infra.config.settings import Settings, get_settings

router = APIRouter(prefix="/generation", tags=["generation"])


@router.get("/models", response_model=ModelsResponse)
async def list_models(
    format: Literal["json", "select"] = "json",
    settings: Settings = Depends(get_settings),
) -> ModelsResponse:
    """Fallback model ids, optionally formatted for a dropdown."""
    if format == "select":
        data = [ModelOption(**option) for option in format_model_options(DEFAULT_MODELS)]
    else:
        data = list(DEFAULT_MODELS)
    return ModelsResponse(data=data, count=len(data), default=settings.default_model)


@router.get("/prompt", response_model=PromptResponse)
async def get_prompt(
    topic: str = Query(..., min_length=1, max_length=500),
    format: Literal["markdown", "json"] = "markdown",
) -> PromptResponse:
    """System prompt the generator sends for ``topic``."""
    try:
        prompt = PresentationContentPrompts.build(topic, InputFormat(format))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return PromptResponse(topic=topic, format=format, prompt=prompt)
