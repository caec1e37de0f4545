"""
Reader/writer lock used to guard the in-memory movie map.
Many readers may hold the lock together; a writer holds it alone.
Queued writers block new readers so a steady stream of lookups cannot starve inserts.
"""

import threading  # Condition provides the mutex + wait/notify we build on
from contextlib import contextmanager  # expose acquire/release as `with` blocks
from typing import Iterator


class ReadWriteLock:
	"""Non-reentrant reader/writer lock built on a single threading.Condition."""

	def __init__(self):
		self._cond = threading.Condition(threading.Lock())  # guards the counters below
		self._readers = 0  # number of threads currently reading
		self._writer = False  # True while a writer holds the lock
		self._waiting_writers = 0  # writers queued behind current holders

	def acquire_read(self):
		with self._cond:
			while self._writer or self._waiting_writers:
				self._cond.wait()
			self._readers += 1

	def release_read(self):
		with self._cond:
			if self._readers <= 0:
				raise RuntimeError("release_read() called without a matching acquire_read()")
			self._readers -= 1
			if self._readers == 0:
				self._cond.notify_all()  # wake a queued writer

	def acquire_write(self):
		with self._cond:
			self._waiting_writers += 1
			try:
				while self._writer or self._readers:
					self._cond.wait()
			finally:
				self._waiting_writers -= 1
			self._writer = True

	def release_write(self):
		with self._cond:
			if not self._writer:
				raise RuntimeError("release_write() called without a matching acquire_write()")
			self._writer = False
			self._cond.notify_all()  # readers and writers both may proceed

	@contextmanager
	def read_locked(self) -> Iterator[None]:
		"""Hold the lock in shared mode for the duration of the block."""
		self.acquire_read()
		try:
			yield
		finally:
			self.release_read()

	@contextmanager
	def write_locked(self) -> Iterator[None]:
		"""Hold the lock in exclusive mode for the duration of the block."""
		self.acquire_write()
		try:
			yield
		finally:
			self.release_write()
