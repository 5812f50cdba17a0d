"""The firefly counter held by the counter service.

The counter is a single non-negative integer. It lives only as long as the
`.GardenServer` that owns it: nothing is written to disk, so restarting the
service starts the garden from zero again.

Request handlers are synchronous functions, which FastAPI runs in a
threadpool. That means two requests may be handled at once, so every
read-modify-write of the count happens while holding a lock.
"""

from __future__ import annotations
import logging
from threading import Lock

from .models import FireflyCount, now

_LOGGER = logging.getLogger(__name__)


class FireflyCounter:
    """An in-memory count of released fireflies.

    There is no upper bound on the count. The garden client only draws
    the first 120 fireflies, but the service keeps counting past that.
    """

    def __init__(self) -> None:
        """Create a counter, starting at zero."""
        self._lock = Lock()  # This Lock protects _count
        self._count = 0

    @property
    def count(self) -> int:
        """The number of fireflies currently in the garden."""
        with self._lock:
            return self._count

    def release(self) -> int:
        """Release one more firefly.

        :return: the count after incrementing.
        """
        with self._lock:
            self._count += 1
            count = self._count
        _LOGGER.debug("Released a firefly, count is now %d", count)
        return count

    def reset(self) -> int:
        """Remove every firefly from the garden.

        :return: the count after resetting, which is always zero.
        """
        with self._lock:
            previous = self._count
            self._count = 0
        _LOGGER.info("Garden reset (%d fireflies removed)", previous)
        return 0

    def snapshot(self) -> FireflyCount:
        """Describe the current count, stamped with the current time.

        :return: a `.FireflyCount` model ready to be returned over HTTP.
        """
        return FireflyCount(firefly_count=self.count, updated_at=now())
