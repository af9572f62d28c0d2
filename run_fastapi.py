"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn marketchat.main:app --host 0.0.0.0 --port 8080 --reload
"""

import uvicorn
from marketchat.config.settings import Config

if __name__ == "__main__":
    debug = Config.APP_ENV == "development"

    print(f"Starting FastAPI application in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "marketchat.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
