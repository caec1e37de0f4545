"""
FastAPI server exposing the movie store.
Endpoints:
- GET /health: basic health check with the number of stored movies
- POST /movie: create a movie from a JSON body, returns 201 with the stored record
- GET /movie/{movie_id}: fetch a movie by id, 404 when unknown

One MovieStore is built per app in create_app() and handed to the handlers
through a FastAPI dependency.
"""

# Import standard libraries for timing
import time  # measure uptime
from typing import Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
from fastapi import Depends, FastAPI, HTTPException, Request, status  # FastAPI primitives
from pydantic import BaseModel, ConfigDict, Field  # request/response schema definitions

# Import our internal modules for the store and settings
from src.config import Settings  # environment-driven settings
from src.movie_store import MovieNotFoundError, MovieStore  # core store

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Pydantic model for the body of POST /movie (strict, like a typed JSON decoder)
class CreateMovie(BaseModel):
	model_config = ConfigDict(strict=True)

	name: str  # movie name
	year: int = Field(ge=0, le=65535)  # release year, must fit in 16 bits
	was_good: bool  # verdict


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: str  # generated identifier
	name: str  # movie name
	year: int  # release year
	was_good: bool  # verdict


def get_store(request: Request) -> MovieStore:
	"""Dependency returning the store owned by the running app."""
	return request.app.state.store


def create_app(store: Optional[MovieStore] = None, settings: Optional[Settings] = None) -> FastAPI:
	"""Build the FastAPI application around one shared MovieStore."""
	app = FastAPI(title="Movie Store API", version="1.0.0")  # web app
	app.state.store = store if store is not None else MovieStore()  # the one store for this process
	app.state.settings = settings or Settings.from_env()
	app.state.started_at = time.time()  # for uptime reporting

	# FastAPI startup hook to report readiness once
	@app.on_event("startup")
	async def startup_event():
		"""Log that the store is ready to serve requests."""
		logger.info(f"[API] Startup complete. Store holds {len(app.state.store)} movies.")

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health(store: MovieStore = Depends(get_store)):
		"""Return minimal health info for liveness/readiness probes."""
		return {
			"status": "ok",  # constant indicator
			"movies": len(store),  # records currently stored
			"uptime_seconds": round(time.time() - app.state.started_at, 2),
		}

	@app.post("/movie", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
	def movie_create(payload: CreateMovie, store: MovieStore = Depends(get_store)):
		"""Create a movie and return the stored record."""
		logger.debug(f"[API] POST /movie name={payload.name!r} year={payload.year}")
		movie = store.create(payload.name, payload.year, payload.was_good)
		return MovieOut(**movie.to_dict())

	@app.get("/movie/{movie_id}", response_model=MovieOut)
	def movie_get(movie_id: str, store: MovieStore = Depends(get_store)):
		"""Return the movie stored under movie_id, or 404."""
		try:
			movie = store.get(movie_id)
		except MovieNotFoundError:
			logger.info(f"[API] GET /movie/{movie_id} -> 404")
			raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")
		return MovieOut(**movie.to_dict())

	return app


# Module-level app for `uvicorn api:app`
app = create_app()
