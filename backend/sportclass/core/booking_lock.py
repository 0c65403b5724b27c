"""
Per-teacher booking lock.

Two concurrent bookings for the same teacher could both pass the conflict
scan before either one writes. Holding the teacher's lock from the scan
through the commit serializes those decisions inside one process.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
import threading
from typing import Iterator
import weakref

from sportclass.core.config import settings
from sportclass.monitoring.prometheus_metrics import prometheus_metrics

logger = logging.getLogger(__name__)

# Entries vanish once no thread holds or waits on the lock.
_LOCKS: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()
_REGISTRY_LOCK = threading.Lock()


def _lock_key(teacher_id: str) -> str:
    return f"teacher:{teacher_id}:booking"


def _get_lock(teacher_id: str) -> threading.Lock:
    key = _lock_key(teacher_id)
    with _REGISTRY_LOCK:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = threading.Lock()
            _LOCKS[key] = lock
        return lock


@contextmanager
def teacher_booking_lock(teacher_id: str, enabled: bool | None = None) -> Iterator[bool]:
    """
    Hold the booking lock for ``teacher_id`` for the duration of the block.

    Yields True when the lock is held, False when locking is disabled by
    configuration (the unsynchronized behaviour).
    """
    if enabled is None:
        enabled = settings.booking_lock_enabled
    if not enabled:
        prometheus_metrics.record_booking_lock("acquire", "disabled")
        yield False
        return

    lock = _get_lock(teacher_id)
    if not lock.acquire(blocking=False):
        prometheus_metrics.record_booking_lock("acquire", "contended")
        logger.debug("booking_lock_contended", extra={"teacher_id": teacher_id})
        lock.acquire()
    prometheus_metrics.record_booking_lock("acquire", "success")
    try:
        yield True
    finally:
        lock.release()
        prometheus_metrics.record_booking_lock("release", "success")


def reset_booking_locks() -> None:
    """Drop every registered lock. Only safe when no booking is in flight."""
    with _REGISTRY_LOCK:
        _LOCKS.clear()
