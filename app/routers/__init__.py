# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - people.py: Person CRUD endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import people

__all__ = [
    "people",
]
