# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient for the API
# =============================================================================

import os
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

ROOT_DIR = Path(__file__).parent.parent

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("VALUES_FILE", str(ROOT_DIR / "values.env"))
os.environ.setdefault("CONFIG_CODE", "12345")
os.environ.setdefault("CONFIG_USERNAME", "Jose")
os.environ.setdefault("CONFIG_MESSAGE", "Hola que tal")
os.environ.setdefault("CONFIG_LIST_OF_VALUES", "uno,dos,tres")
os.environ.setdefault(
    "CONFIG_VALUES_MAP",
    '{"product": "Computadora", "description": "Asus Rog Strix", "price": "1000"}',
)

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient that re-raises nothing, so 500 responses can be asserted."""
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def values_env(tmp_path):
    """A values file with different config.* values than the environment."""
    path = tmp_path / "values.env"
    path.write_text(
        "CONFIG_CODE=7\n"
        "CONFIG_USERNAME=Ana\n"
        "CONFIG_MESSAGE=Buenas\n"
        "CONFIG_LIST_OF_VALUES=a,b\n"
        "CONFIG_VALUES_MAP='{\"product\": \"Teclado\"}'\n",
        encoding="utf-8",
    )
    return path
