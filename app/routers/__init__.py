# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - home.py: Root and /home redirects
# - path_variables.py: Path variable, body and config value endpoints
# - request_params.py: Query parameter endpoints
# - users.py: Server-rendered HTML views
# - user_api.py: User JSON endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import home
from . import path_variables
from . import request_params
from . import user_api
from . import users

__all__ = [
    "health",
    "home",
    "path_variables",
    "request_params",
    "user_api",
    "users",
]
