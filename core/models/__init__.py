# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - params.py: ParamDto (echo of extracted request parameters)
# - user.py: User value object and UserDto wrapper
#
# These models define the "contract" between API and clients.
# =============================================================================

from .params import ParamDto
from .user import User, UserDto

__all__ = [
    "ParamDto",
    "User",
    "UserDto",
]
