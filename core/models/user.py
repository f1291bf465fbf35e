# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the user payloads:
# - User: Value object (name, lastname, optional email)
# - UserDto: Title + user wrapper used to shape /api/details
# =============================================================================

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A person shown by the demo endpoints.

    Users have no identity beyond their fields, so two users with the same
    name, lastname and email compare equal.

    Example:
        {
            "name": "Jose",
            "lastname": "Carrillo",
            "email": "carrillo@email.com"
        }
    """

    name: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    email: str | None = Field(default=None, description="Optional email address")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"name": "ana", "lastname": "lopez"},
                {"name": "Jose", "lastname": "Carrillo", "email": "carrillo@email.com"},
            ]
        },
    }

    def with_upper_names(self) -> "User":
        """Return a copy with name and lastname upper-cased."""
        return self.model_copy(
            update={"name": self.name.upper(), "lastname": self.lastname.upper()}
        )


class UserDto(BaseModel):
    """Response wrapper pairing a page title with a user."""

    title: str
    user: User
