#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the People API under uvicorn.
#
# Usage:
#   python scripts/start_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --host 0.0.0.0 --port 8080
#
# Prerequisites:
#   - MONGODB_URI must be set (environment or .env file)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("People API")
    print("=" * 60)
    print()
    print(f"Listening on {settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
