# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends(), so handlers get
# their configuration passed in rather than looking it up themselves.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, ValuesConfig, get_settings, get_values_config
from core.fixtures import view_users
from core.models import User


def get_app_settings() -> Settings:
    """Get the application settings instance."""
    return get_settings()


def get_values() -> ValuesConfig:
    """
    Get the config.* values.

    Returns the instance loaded once at startup.
    """
    return get_values_config()


def users_model() -> list[User]:
    """
    User list shared by every server-rendered view.

    Injected into each view handler so templates can always render `users`.
    """
    return view_users()


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ValuesDep = Annotated[ValuesConfig, Depends(get_values)]
UsersModelDep = Annotated[list[User], Depends(users_model)]
