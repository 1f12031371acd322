"""API v1 routers"""

from fastapi import APIRouter

from .generation import router as generation_router
from .presentations import router as presentations_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(presentations_router)
v1_router.include_router(generation_router)
