# =============================================================================
# core/ - Domain Package
# =============================================================================
# This package contains framework-agnostic code:
# - models/: Pydantic schemas for the request/response payloads
# - fixtures.py: The fixed users and titles served by the demo endpoints
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
