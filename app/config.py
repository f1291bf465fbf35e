# =============================================================================
# app/config.py - Application Settings and Injected Values
# =============================================================================
# This module loads configuration using pydantic-settings. It exposes two
# objects, both built once at process start and read-only afterwards:
#
# - Settings: how the API itself runs (environment, logging, CORS)
# - ValuesConfig: the "config.*" values the demo endpoints hand back
#
# Usage:
#   from app.config import settings, get_values_config
#   print(get_values_config().product)
#
# Values are loaded from:
# 1. System environment variables
# 2. values.env in project root (or the file named by VALUES_FILE)
#
# Environment variables always win over the file.
# =============================================================================

from functools import lru_cache
from typing import Any, Callable, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Values Source
    # -------------------------------------------------------------------------

    VALUES_FILE: str = Field(
        default="values.env",
        description="Path of the file holding the config.* values"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Dotted property names as they appear in the values source documentation,
# mapped to ValuesConfig field names.
PROPERTY_KEYS: dict[str, str] = {
    "config.code": "code",
    "config.username": "username",
    "config.message": "message",
    "config.listOfValues": "list_of_values",
    "config.valuesMap": "values_map",
}


class ValuesConfig(BaseSettings):
    """
    The config.* values handed to the demo endpoints.

    Each field maps to a CONFIG_* variable, e.g. `config.listOfValues`
    is read from CONFIG_LIST_OF_VALUES. `values_map` is given as a JSON
    object and parsed by pydantic-settings.

    Example values.env:
        CONFIG_CODE=12345
        CONFIG_LIST_OF_VALUES=uno,dos,tres
        CONFIG_VALUES_MAP='{"product": "Computadora"}'
    """

    code: int = Field(..., description="config.code")
    username: str = Field(..., description="config.username")
    message: str = Field(..., description="config.message")
    list_of_values: str = Field(..., description="config.listOfValues (comma-separated)")
    values_map: dict[str, Any] = Field(
        default_factory=dict,
        description="config.valuesMap (JSON object)"
    )

    model_config = SettingsConfigDict(
        env_prefix="CONFIG_",
        env_file="values.env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def value_list(self) -> list[str]:
        """
        Split config.listOfValues on commas.

        Example: "uno,dos,tres" -> ["uno", "dos", "tres"]
        """
        return self.list_of_values.split(",")

    @property
    def value_string(self) -> str:
        """config.listOfValues upper-cased, kept as a single string."""
        return self.list_of_values.upper()

    @property
    def product(self) -> Any:
        """The `product` entry of config.valuesMap, or None."""
        return self.values_map.get("product")

    def get_property(self, key: str, cast: Callable[[Any], Any] | None = None) -> Any:
        """
        Look a value up by its dotted property name.

        Args:
            key: Property name such as "config.message"
            cast: Optional callable applied to the value (e.g. int)

        Returns:
            The value, cast if requested, or None for unknown keys
        """
        field_name = PROPERTY_KEYS.get(key)
        if field_name is None:
            return None
        value = getattr(self, field_name)
        return cast(value) if cast is not None else value

    def snapshot(self) -> dict[str, Any]:
        """All loaded values in the shape returned by GET /api/var/values."""
        return {
            "username": self.username,
            "message": self.message,
            "listOfValues": self.value_list,
            "code": self.code,
            "valueList": self.value_list,
            "valueString": self.value_string,
            "valuesMap": dict(self.values_map),
            "product": self.product,
            "message2": self.get_property("config.message"),
            "code2": self.get_property("config.code", int),
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


@lru_cache
def get_values_config() -> ValuesConfig:
    """
    Get the cached ValuesConfig, loaded once from VALUES_FILE and the environment.

    Raises:
        pydantic.ValidationError: If a required value is missing or malformed
    """
    return ValuesConfig(_env_file=get_settings().VALUES_FILE)


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
