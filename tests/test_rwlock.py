"""
Unit tests for ReadWriteLock: shared readers, exclusive writers, no writer starvation.
Run: pytest tests/test_rwlock.py
"""

import threading
import time

import pytest

from src.rwlock import ReadWriteLock


def test_readers_overlap():
	lock = ReadWriteLock()
	both_inside = threading.Barrier(2, timeout=5)  # breaks if the readers cannot overlap

	def reader():
		with lock.read_locked():
			both_inside.wait()

	threads = [threading.Thread(target=reader) for _ in range(2)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()

	assert not both_inside.broken


def test_writer_waits_for_reader():
	lock = ReadWriteLock()
	acquired = threading.Event()

	def writer():
		with lock.write_locked():
			acquired.set()

	lock.acquire_read()
	t = threading.Thread(target=writer)
	t.start()
	assert not acquired.wait(0.2)  # blocked while the read lock is held
	lock.release_read()
	assert acquired.wait(5)
	t.join()


def test_reader_waits_for_writer():
	lock = ReadWriteLock()
	acquired = threading.Event()

	def reader():
		with lock.read_locked():
			acquired.set()

	lock.acquire_write()
	t = threading.Thread(target=reader)
	t.start()
	assert not acquired.wait(0.2)
	lock.release_write()
	assert acquired.wait(5)
	t.join()


def test_queued_writer_blocks_new_readers():
	lock = ReadWriteLock()
	order = []
	writer_done = threading.Event()

	def writer():
		with lock.write_locked():
			order.append("writer")
		writer_done.set()

	def late_reader():
		with lock.read_locked():
			order.append("reader")

	lock.acquire_read()
	w = threading.Thread(target=writer)
	w.start()
	# Wait until the writer is queued behind the held read lock
	while lock._waiting_writers == 0:
		time.sleep(0.01)
	r = threading.Thread(target=late_reader)
	r.start()
	lock.release_read()
	w.join(5)
	r.join(5)

	assert writer_done.is_set()
	assert order == ["writer", "reader"]


def test_unbalanced_release_raises():
	lock = ReadWriteLock()
	with pytest.raises(RuntimeError):
		lock.release_read()
	with pytest.raises(RuntimeError):
		lock.release_write()


def test_lock_released_after_exception():
	lock = ReadWriteLock()
	with pytest.raises(ValueError):
		with lock.write_locked():
			raise ValueError("boom")
	# Both modes are available again
	with lock.read_locked():
		pass
	with lock.write_locked():
		pass
