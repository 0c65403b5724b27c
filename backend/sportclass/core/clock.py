"""
Clock utilities for the SportClass scheduling service.

The service works on a single implicit local clock: naive datetimes in the
server's local time. Services receive a ``Clock`` so tests can pin "now".
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()


def fixed_clock(moment: datetime) -> Clock:
    """Build a clock that always returns ``moment``."""

    def _clock() -> datetime:
        return moment

    return _clock
