"""
Runtime settings for the Movie Store service.
Values come from environment variables; defaults bind the API to 127.0.0.1:3000.
"""

import os  # environment-based settings
import sys  # stderr sink for loguru
from dataclasses import dataclass  # immutable settings container

from loguru import logger  # console logger


DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_API_URL = 'http://localhost:3000'


@dataclass(frozen=True)
class Settings:
	host: str = DEFAULT_HOST  # address the API listens on
	port: int = DEFAULT_PORT  # port the API listens on
	log_level: str = DEFAULT_LOG_LEVEL  # loguru level for the console sink
	api_url: str = DEFAULT_API_URL  # base URL used by the Streamlit client

	@classmethod
	def from_env(cls) -> 'Settings':
		"""Build settings from MOVIE_API_* environment variables, falling back to defaults."""
		raw_port = os.getenv('MOVIE_API_PORT', str(DEFAULT_PORT))
		try:
			port = int(raw_port)
		except ValueError:
			raise ValueError(f"MOVIE_API_PORT must be an integer, got {raw_port!r}") from None
		if not 0 < port < 65536:
			raise ValueError(f"MOVIE_API_PORT out of range: {port}")

		return cls(
			host=os.getenv('MOVIE_API_HOST', DEFAULT_HOST),
			port=port,
			log_level=os.getenv('MOVIE_API_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
			api_url=os.getenv('MOVIE_API_URL', DEFAULT_API_URL).rstrip('/'),
		)


def configure_logging(level: str = DEFAULT_LOG_LEVEL):
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()  # drop the default DEBUG sink
	logger.add(sys.stderr, level=level)
