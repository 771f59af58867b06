"""
Main entry point for the Temperature Conversion API.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn temperature_api.fastapi_app:app --host 0.0.0.0 --port 8080 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from temperature_api.config.settings import get_config

if __name__ == "__main__":
    config = get_config()
    debug = config.DEBUG

    print(f"Starting Temperature Conversion API in {config.APP_ENV} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "temperature_api.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
