# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Request Binding Demo API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_config.py: Settings and config.* value loading
# - test_path_variables.py, test_request_params.py: binding endpoints
# - test_users.py: User JSON endpoints and HTML views
# - test_home_health.py: Redirects and health checks
#
# Run tests with: pytest
# =============================================================================
