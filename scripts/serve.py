"""
Run the Movie Store API.

This script:
1) Reads settings from MOVIE_API_* environment variables
2) Configures the console logger
3) Builds the app with a fresh, empty store
4) Serves it with uvicorn until interrupted

Usage:
    poetry run python -m scripts.serve
"""

import uvicorn  # ASGI server

from loguru import logger  # console logging

from api import create_app  # FastAPI app factory
from src.config import Settings, configure_logging  # env settings + logger setup


def main():
	# 1) Load settings
	settings = Settings.from_env()

	# 2) Logging
	configure_logging(settings.log_level)

	# 3) Build the app; the store lives as long as this process
	app = create_app(settings=settings)

	# 4) Serve
	logger.info(f"[Serve] Running on {settings.host}:{settings.port}")
	uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
	main()  # invoke server
