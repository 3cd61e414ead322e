"""
Main entry point for the University Portal API.
Run this file to start the server.

Usage:
    python run.py

Or with uvicorn directly:
    uvicorn portal.main:app --host 0.0.0.0 --port 5000
"""

import uvicorn

# importing the settings also loads .env
from portal.config import settings

if __name__ == "__main__":
    debug = settings.ENV == "dev"

    print(f"Starting University Portal API in {settings.ENV} mode...")
    print(f"Server running on http://{settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "portal.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=debug,
        log_level=settings.LOG_LEVEL.lower(),
    )
