# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, lifespan (MongoDB connect/disconnect), error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Error-to-response mapping
# - dependencies.py: Per-app store injection
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence to lib/person_store.py.
# =============================================================================
