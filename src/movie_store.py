"""
Movie store module.
Holds every movie record in an in-memory map keyed by a generated identifier and
exposes the two operations the request layer calls: create and get.

Concurrency: lookups share a reader lock, inserts take it exclusively. Each
operation holds the lock only for its single map access.
"""

import uuid  # random 128-bit identifiers
from dataclasses import replace  # copy frozen records on the way out
from typing import Callable, Dict, Optional  # type hints

# Import project modules for the record type and the lock guarding the map
from .models import Movie  # stored record
from .rwlock import ReadWriteLock  # many readers, one writer

# Console logging
from loguru import logger  # console logger


def new_movie_id() -> str:
	"""Return a random UUID4 in its canonical 36-character string form."""
	return str(uuid.uuid4())


class MovieNotFoundError(LookupError):
	"""Raised by MovieStore.get when no record has the requested identifier."""

	def __init__(self, movie_id: str):
		super().__init__(f"Movie not found: {movie_id}")
		self.movie_id = movie_id  # the identifier that missed


class IdentifierCollisionError(RuntimeError):
	"""
	Raised when a freshly generated identifier is already a key in the store.
	This means the uniqueness assumption behind id generation is broken; callers
	should not try to recover from it.
	"""


class MovieStore:
	"""
	Process-wide, thread-safe collection of movie records.
	Records are only ever added; none is mutated or removed once stored.
	"""

	def __init__(self, id_factory: Optional[Callable[[], str]] = None):
		"""
		Create an empty store.
		- id_factory: callable producing new identifiers (defaults to UUID4 strings)
		"""
		self._movies: Dict[str, Movie] = {}  # id -> Movie
		self._lock = ReadWriteLock()  # guards _movies
		self._id_factory = id_factory or new_movie_id  # identifier source
		logger.debug("[Store] Initialized empty movie store")

	def create(self, name: str, year: int, was_good: bool) -> Movie:
		"""
		Store a new movie under a generated identifier and return a copy of it.
		Inputs are taken as-is; the record is visible to every get() issued after this returns.
		"""
		movie = Movie(id=self._id_factory(), name=name, year=year, was_good=was_good)

		with self._lock.write_locked():
			if movie.id in self._movies:
				raise IdentifierCollisionError(f"Generated identifier already in use: {movie.id}")
			self._movies[movie.id] = movie

		logger.info(f"[Store] Created movie | id={movie.id} | name={movie.name!r} | year={movie.year}")
		return replace(movie)

	def get(self, movie_id: str) -> Movie:
		"""Return a copy of the record stored under movie_id, or raise MovieNotFoundError."""
		with self._lock.read_locked():
			movie = self._movies.get(movie_id)

		if movie is None:
			logger.debug(f"[Store] Lookup miss | id={movie_id}")
			raise MovieNotFoundError(movie_id)
		logger.debug(f"[Store] Lookup hit | id={movie_id}")
		return replace(movie)

	def __contains__(self, movie_id: object) -> bool:
		with self._lock.read_locked():
			return movie_id in self._movies

	def __len__(self) -> int:
		with self._lock.read_locked():
			return len(self._movies)
