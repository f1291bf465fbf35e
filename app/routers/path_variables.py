# =============================================================================
# app/routers/path_variables.py - Path Variable and Body Binding Endpoints
# =============================================================================
# Demonstrates values bound from the URL path, from a JSON body and from
# the injected configuration.
# Mounted under /api/var in main.py.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import ValuesDep
from core.models import ParamDto, User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/baz/{message}", response_model=ParamDto)
async def baz(
    message: Annotated[str, Path(description="Message taken from the path")],
):
    """
    Echo a single path segment.

    Returns the segment as the `message` of a ParamDto.
    """
    logger.debug(f"baz: message={message!r}")
    return ParamDto(message=message)


@router.get("/mix/{product}/{code}")
async def mix(
    product: Annotated[str, Path(description="Product name")],
    code: Annotated[int, Path(description="Numeric product code")],
) -> dict[str, Any]:
    """
    Bind two path segments, one of them converted to an integer.

    A non-numeric code is rejected with 400.
    """
    logger.debug(f"mix: product={product!r} code={code}")
    return {"product": product, "code": code}


@router.post("/create", response_model=User)
async def create(
    user: Annotated[User, Body(description="User to echo back")],
):
    """
    Echo a user from the request body with name and lastname upper-cased.

    Nothing is stored.
    """
    created = user.with_upper_names()
    logger.debug(f"create: {user.name} {user.lastname} -> {created.name} {created.lastname}")
    return created


@router.get("/values")
async def values(config: ValuesDep) -> dict[str, Any]:
    """
    Snapshot of every config.* value loaded at startup.

    Includes the raw list, its split and upper-cased variants, the values
    map with its `product` entry, and `message2`/`code2` read back through
    the dotted property lookup.
    """
    return config.snapshot()
