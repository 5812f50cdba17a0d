r"""Firefly Garden.

A garden of fireflies, counted by a tiny HTTP service. The counter service
is a `.GardenServer`\ , which keeps a count of released fireflies in memory
and serves it with FastAPI. The garden itself is a `.GardenClient`\ , which
reads and changes the count through a `.CounterClient`\ , derives the
fireflies to draw with `.make_fireflies`\ , and manages the ambient audio.

This module contains a number of convenience imports, so that the most
useful symbols may be imported directly from ``firefly_garden``.
"""

from .counter import FireflyCounter
from .models import FireflyCount
from .layout import Firefly, Mulberry32, make_fireflies, MAX_FIREFLIES, LAYOUT_SEED
from .server import GardenServer
from .server.config_model import GardenServerConfig
from .client import BACKEND_URL, CounterClient, GardenClient, AudioChannel
from .exceptions import BackendNotReachableError

# The symbols in __all__ are part of our public API.
__all__ = [
    "FireflyCounter",
    "FireflyCount",
    "Firefly",
    "Mulberry32",
    "make_fireflies",
    "MAX_FIREFLIES",
    "LAYOUT_SEED",
    "GardenServer",
    "GardenServerConfig",
    "BACKEND_URL",
    "CounterClient",
    "GardenClient",
    "AudioChannel",
    "BackendNotReachableError",
]
