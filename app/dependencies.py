# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The store lives on app.state, set by create_app() or by the startup
# lifespan, so each app instance (including test apps) has its own.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from lib.person_store import PersonStore


def get_person_store(request: Request) -> PersonStore:
    """
    Get the PersonStore bound to this application.

    Raises:
        RuntimeError: If the app started without a store (lifespan not run)
    """
    store = getattr(request.app.state, "person_store", None)
    if store is None:
        raise RuntimeError("Person store is not initialized")
    return store


def is_strict_errors(request: Request) -> bool:
    """Whether this app reports client errors as 400/404."""
    return bool(getattr(request.app.state, "strict_errors", False))


# Type aliases for dependency injection
PersonStoreDep = Annotated[PersonStore, Depends(get_person_store)]
StrictErrorsDep = Annotated[bool, Depends(is_strict_errors)]
