"""
Data models for the Movie Store service.
Defines the record type held by the store and returned to callers.
"""

# Import dataclass helpers to define an immutable "record-like" class without boilerplate
from dataclasses import dataclass, asdict  # auto-generates __init__, __eq__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict  # plain dict representation


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single stored movie.
	The id is assigned by the store at creation time; the other fields come from the caller as-is.
	"""
	id: str  # generated unique identifier (canonical UUID string)
	name: str  # movie name, no length or charset constraint
	year: int  # release year, fits in 16 bits (not validated here)
	was_good: bool  # caller's verdict

	def to_dict(self) -> Dict[str, Any]:
		"""Return the record as a plain dict with the four public fields."""
		return asdict(self)
