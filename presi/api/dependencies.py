"""
FastAPI dependency providers.
"""

from fastapi import Depends

from presi.application.projection import HtmlProjector
from presi.infra.config.settings import Settings, get_settings


def get_html_projector(settings: Settings = Depends(get_settings)) -> HtmlProjector:
    return HtmlProjector(settings=settings)
