# =============================================================================
# core/models/params.py - Parameter Echo Schema
# =============================================================================
# ParamDto is the response shape of the parameter binding demos:
# - /api/params/foo, /api/params/bar, /api/params/request
# - /api/var/baz/{message}
#
# It is built fresh for every request and discarded after serialization.
# =============================================================================

from pydantic import BaseModel, Field


class ParamDto(BaseModel):
    """
    Message and code extracted from a request.

    Example:
        {
            "message": "hola",
            "code": 7
        }
    """

    message: str | None = Field(
        default=None,
        description="Text taken from the path, query string or raw parameters"
    )

    # Not every handler sets a code; /foo and /baz leave it null
    code: int | None = Field(
        default=None,
        description="Integer code, when the handler binds one"
    )
