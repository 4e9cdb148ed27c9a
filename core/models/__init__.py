# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - person.py: Person record (request body and response shape)
#
# These models define the "contract" between API and clients.
# =============================================================================

from .person import Person

__all__ = [
    "Person",
]
