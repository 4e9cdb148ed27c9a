# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - person_store.py: MongoDB-backed record store and connection bootstrap
# - utils.py: Shared utilities (error base class, ObjectId parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.person_store import (
    COLLECTION,
    DATABASE,
    IdFilter,
    InvalidIdentifierError,
    PersonNotFoundError,
    PersonStore,
    StoreError,
    connect_store,
)
from lib.utils import ApplicationError, parse_object_id

__all__ = [
    # Store
    "COLLECTION",
    "DATABASE",
    "IdFilter",
    "InvalidIdentifierError",
    "PersonNotFoundError",
    "PersonStore",
    "StoreError",
    "connect_store",
    # Utils
    "ApplicationError",
    "parse_object_id",
]
