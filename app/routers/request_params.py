# =============================================================================
# app/routers/request_params.py - Query Parameter Endpoints
# =============================================================================
# Demonstrates three ways of reading the query string:
# - /foo: optional parameter with a default
# - /bar: required parameters validated by FastAPI
# - /request: reading the raw parameter mapping off the request
# Mounted under /api/params in main.py.
# =============================================================================

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Query, Request

from core.models import ParamDto

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_MESSAGE = "mensaje por defecto"

# Codes are 32-bit signed integers
INT_MIN = -2**31
INT_MAX = 2**31 - 1

_PLAIN_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_code(value: str | None) -> int:
    """
    Convert a raw parameter to a 32-bit integer.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace, underscores and non-ASCII digits are rejected.

    Raises:
        TypeError: If the value is None
        ValueError: If the value is not a plain integer or is out of range
    """
    if value is None:
        raise TypeError("code parameter is missing")
    if not _PLAIN_INTEGER.fullmatch(value):
        raise ValueError(f"code is not an integer: {value!r}")
    code = int(value)
    if not INT_MIN <= code <= INT_MAX:
        raise ValueError(f"code out of range: {value!r}")
    return code


@router.get("/foo", response_model=ParamDto)
async def foo(
    message: Annotated[str | None, Query(description="Optional message")] = None,
):
    """
    Echo an optional query parameter.

    Falls back to "mensaje por defecto" when `message` is absent or empty.
    """
    logger.debug(f"foo: message={message!r}")
    return ParamDto(message=message or DEFAULT_MESSAGE)


@router.get("/bar", response_model=ParamDto)
async def bar(
    text: Annotated[str, Query(description="Message text")],
    code: Annotated[int, Query(ge=INT_MIN, le=INT_MAX, description="Numeric code")],
):
    """
    Echo two required query parameters.

    A missing parameter, a non-numeric code or a code outside the 32-bit
    range is rejected with 400.
    """
    logger.debug(f"bar: text={text!r} code={code}")
    return ParamDto(message=text, code=code)


@router.get("/request", response_model=ParamDto)
async def request_params(request: Request):
    """
    Read `code` and `message` straight from the raw query mapping.

    No binding or validation happens here: a missing or malformed `code`
    fails with an unhandled error (500) instead of a 400 response.
    """
    params = request.query_params
    # parse_code raises and the error is left to the generic handler
    code = parse_code(params.get("code"))
    message = params.get("message")
    logger.debug(f"request: code={code} message={message!r}")
    return ParamDto(message=message, code=code)
