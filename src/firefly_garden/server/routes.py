"""The HTTP API of the counter service.

All three endpoints return the same `.FireflyCount` body. None of them read
a request body or query parameters, and none of them can fail in normal
operation.
"""

from fastapi import APIRouter

from ..models import FireflyCount, now
from .dependencies import CounterDep

fireflies_router = APIRouter(prefix="/api/fireflies", tags=["fireflies"])


@fireflies_router.get("", response_model=FireflyCount)
def get_count(counter: CounterDep) -> FireflyCount:
    """Read the number of fireflies in the garden."""
    return counter.snapshot()


@fireflies_router.post("/release", response_model=FireflyCount)
def release(counter: CounterDep) -> FireflyCount:
    """Release a firefly into the garden, increasing the count by one."""
    return FireflyCount(firefly_count=counter.release(), updated_at=now())


@fireflies_router.post("/reset", response_model=FireflyCount)
def reset(counter: CounterDep) -> FireflyCount:
    """Remove every firefly, setting the count back to zero."""
    return FireflyCount(firefly_count=counter.reset(), updated_at=now())
