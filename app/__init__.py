# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Settings and the injected config.* values
# - dependencies.py: Depends() providers shared by the routers
# - routers/: API endpoint definitions organized by feature
# - templates/: Jinja2 templates for the HTML views
#
# The app layer is thin - it handles HTTP concerns and delegates
# payload shapes and fixed data to the core/ package.
# =============================================================================

__version__ = "1.0.0"
