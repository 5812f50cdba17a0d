r"""Deterministic placement of fireflies in the garden.

The fireflies drawn in the garden are not stored anywhere: they are derived
from the firefly count each time it changes. To keep the picture stable,
every layout is generated from the same seeded pseudo-random sequence, and
each firefly draws its values in a fixed order. This has two consequences
that the rest of the code relies on:

* Calling `.make_fireflies` twice with the same count gives identical lists.
* The list for a count ``n`` is a prefix of the list for any larger count,
  so releasing a firefly adds one new light without moving the others.

At most `.MAX_FIREFLIES` are drawn, however large the count becomes.

The generator is `.Mulberry32`\ , which is small, fast and produces the same
sequence as the widely used JavaScript implementation. It is used only for
decoration, and is not suitable for anything that needs real randomness.
"""

from __future__ import annotations
from dataclasses import dataclass

LAYOUT_SEED = 12345
"""The seed used for every layout."""

MAX_FIREFLIES = 120
"""The largest number of fireflies drawn, regardless of the count."""

_UINT32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """Multiply two 32-bit integers, keeping the low 32 bits."""
    return (a * b) & _UINT32


class Mulberry32:
    """A seeded 32-bit pseudo-random number generator.

    Each call returns a float in the half-open interval [0, 1).
    """

    def __init__(self, seed: int) -> None:
        """Start a new sequence.

        :param seed: any integer. Only the low 32 bits are used.
        """
        self._state = seed & _UINT32

    def __call__(self) -> float:
        """Return the next number in the sequence.

        :return: a float in [0, 1).
        """
        self._state = (self._state + 0x6D2B79F5) & _UINT32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _UINT32
        return (t ^ (t >> 14)) / 4294967296


@dataclass(frozen=True)
class Firefly:
    """One light in the garden.

    Positions are percentages of the garden size, ``size`` and the drift
    distances are in pixels, and durations and ``delay`` are in seconds.
    """

    id: int
    x: float
    y: float
    size: float
    flicker: float
    """Duration of one flicker cycle."""
    wander: float
    """Duration of one small wandering cycle."""
    drift_duration: float
    """Duration of one long drift across the garden."""
    dx: float
    dy: float
    delay: float
    """Time before all three animations start."""

    def style(self) -> str:
        """Return the inline CSS that positions and animates this firefly.

        :return: a CSS declaration list, suitable for a ``style`` attribute.
        """
        return (
            f"left: {self.x}%; top: {self.y}%; "
            f"width: {self.size}px; height: {self.size}px; "
            f"animation-duration: {self.flicker}s, {self.wander}s, "
            f"{self.drift_duration}s; "
            f"animation-delay: {self.delay}s, {self.delay}s, {self.delay}s; "
            f"--dx: {self.dx}px; --dy: {self.dy}px"
        )


def make_fireflies(count: int) -> list[Firefly]:
    """Generate the fireflies shown for a given count.

    The values for each firefly are drawn in this order: horizontal and
    vertical position, size, the flicker, wander and drift durations, the
    horizontal drift (direction, then distance), the vertical drift
    (direction, then distance), and finally the start delay. Changing
    that order would move every firefly in every existing garden.

    :param count: the number of fireflies in the garden. Counts above
        `.MAX_FIREFLIES` are capped, and negative counts give no fireflies.

    :return: a list of ``min(count, MAX_FIREFLIES)`` fireflies.
    """
    capped = max(0, min(count, MAX_FIREFLIES))
    rand = Mulberry32(LAYOUT_SEED)

    fireflies = []
    for i in range(capped):
        x = rand() * 100
        y = rand() * 100

        # small sizes read more like lights than blobs
        size = 3 + rand() * 6

        flicker = 1.8 + rand() * 3.2
        wander = 3.5 + rand() * 5.5
        drift_duration = 10 + rand() * 18

        dx_direction = rand() * 2 - 1
        dx = dx_direction * (120 + rand() * 240)
        dy_direction = rand() * 2 - 1
        dy = dy_direction * (30 + rand() * 120)

        delay = rand() * 2.5

        fireflies.append(
            Firefly(
                id=i,
                x=x,
                y=y,
                size=size,
                flicker=flicker,
                wander=wander,
                drift_duration=drift_duration,
                dx=dx,
                dy=dy,
                delay=delay,
            )
        )
    return fireflies
