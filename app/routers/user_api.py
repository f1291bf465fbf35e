# =============================================================================
# app/routers/user_api.py - User JSON Endpoints
# =============================================================================
# The same demo users as the HTML views, returned as JSON:
# - /details: typed UserDto
# - /details-map: untyped dict with the same keys
# - /list: fixed list of three users
# Mounted under /api in main.py.
# =============================================================================

from typing import Any

from fastapi import APIRouter

from core.fixtures import DETAILS_TITLE, details_user, rest_users
from core.models import User, UserDto

router = APIRouter()


@router.get("/details", response_model=UserDto)
async def details():
    """Title and user wrapped in a UserDto."""
    return UserDto(title=DETAILS_TITLE, user=details_user())


@router.get("/details-map")
async def details_map() -> dict[str, Any]:
    """Title and user as a plain mapping."""
    return {"title": DETAILS_TITLE, "user": details_user()}


@router.get("/list", response_model=list[User])
async def list_users():
    """Three fixed users, always in the same order."""
    return rest_users()
