# =============================================================================
# core/ - Domain Package
# =============================================================================
# This package contains framework-agnostic domain code:
# - models/: Pydantic schemas for the records the API serves
#
# Code in this package should NOT import from FastAPI.
# This keeps the models testable and reusable.
# =============================================================================
