# =============================================================================
# app/routers/home.py - Home Redirect
# =============================================================================
# The site root and /home send the browser on to the user list.
# =============================================================================

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
@router.get("/home", include_in_schema=False)
async def home():
    """
    Redirect to /list.

    A redirect, not a forward: the browser issues a new request and any
    query parameters are dropped.
    """
    return RedirectResponse(url="/list", status_code=status.HTTP_302_FOUND)
