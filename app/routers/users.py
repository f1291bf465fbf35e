# =============================================================================
# app/routers/users.py - Server-Rendered User Views
# =============================================================================
# HTML pages rendered with Jinja2 templates from app/templates/.
# Every view also receives the shared `users` list (see users_model).
# =============================================================================

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.dependencies import UsersModelDep
from core.fixtures import DETAILS_TITLE, LIST_TITLE, details_user

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/details", response_class=HTMLResponse)
async def details(request: Request, users: UsersModelDep):
    """Render a single user with a title."""
    return templates.TemplateResponse(
        request,
        "details.html",
        {"title": DETAILS_TITLE, "user": details_user(), "users": users},
    )


@router.get("/list", response_class=HTMLResponse)
async def list_users(request: Request, users: UsersModelDep):
    """Render the shared user list."""
    logger.debug(f"list: rendering {len(users)} users")
    return templates.TemplateResponse(
        request,
        "list.html",
        {"title": LIST_TITLE, "users": users},
    )
