"""Pydantic models exchanged between the counter service and its clients."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime.

    :return: the current time.
    """
    return datetime.now(timezone.utc)


class FireflyCount(BaseModel):
    """The state of the garden, as returned by every counter endpoint."""

    firefly_count: int = Field(
        ge=0,
        description="The number of fireflies released since the last reset.",
    )
    updated_at: datetime = Field(
        description=(
            "The time the response was generated. This is not the time of the "
            "last change: it is refreshed even when the count is only read."
        ),
    )
