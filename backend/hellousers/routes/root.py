"""
HelloUsers Backend — Greeting Route
====================================

What:  GET / returns the literal text "Hello World!".
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from hellousers.services.user_service import user_service

router = APIRouter(tags=["Greeting"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def hello() -> str:
    """Headers and query string are ignored."""
    return user_service.greeting()
