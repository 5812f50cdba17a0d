r"""The state and behaviour of the garden page.

`.GardenClient` holds everything the garden page shows: the firefly count,
a status line, the fireflies derived from the count, and the two ambient
audio channels. User actions are methods on the client, and each one
updates the state and then calls the renderer, if one was supplied.

The layout is only recomputed when the count actually changes, using
`.make_fireflies`\ . Because the layout is deterministic, this is purely
an optimisation: recomputing it for the same count gives the same result.

No request is ever retried. If the counter service can't be used, the
status becomes `.STATUS_UNREACHABLE` and the count is left as it was.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from ..exceptions import BackendNotReachableError
from ..layout import Firefly, make_fireflies
from ..models import FireflyCount
from . import CounterClient
from .audio import AudioChannel

STATUS_CONNECTING = "Connecting…"
STATUS_LOADING = "Loading garden…"
STATUS_RELEASING = "Releasing…"
STATUS_RESETTING = "Resetting…"
STATUS_READY = "Ready"
STATUS_UNREACHABLE = "Backend not reachable"

MUSIC_SOURCE = "/audio/music.mp3"
FOREST_SOURCE = "/audio/forest.mp3"
DEFAULT_MUSIC_VOLUME = 0.35
DEFAULT_FOREST_VOLUME = 0.45

Renderer = Callable[["GardenClient"], None]

_LOGGER = logging.getLogger(__name__)


class GardenClient:
    """The garden page, without the browser.

    :ivar count: the number of fireflies, as last reported by the service.
    :ivar status: a human-readable description of what the garden is doing.
    :ivar fireflies: the fireflies to draw for the current count.
    :ivar music: the music audio channel.
    :ivar forest: the forest ambience audio channel.
    """

    def __init__(
        self,
        counter_client: Optional[CounterClient] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """Set up the garden in its initial state.

        Nothing is fetched until `.load` is called.

        :param counter_client: the client used to reach the counter
            service. By default, a `.CounterClient` for `.BACKEND_URL`.
        :param renderer: a function called with this object whenever
            anything shown on the page changes.
        """
        self.counter_client = counter_client or CounterClient()
        self.renderer = renderer
        self.count = 0
        self.status = STATUS_CONNECTING
        self.fireflies: list[Firefly] = make_fireflies(self.count)
        self.music = AudioChannel("music", MUSIC_SOURCE, DEFAULT_MUSIC_VOLUME)
        self.forest = AudioChannel("forest", FOREST_SOURCE, DEFAULT_FOREST_VOLUME)

    @property
    def audio_channels(self) -> tuple[AudioChannel, AudioChannel]:
        """Both audio channels, music first."""
        return (self.music, self.forest)

    def render(self) -> None:
        """Show the current state, by calling the renderer."""
        if self.renderer is not None:
            self.renderer(self)

    def _set_status(self, status: str) -> None:
        self.status = status
        self.render()

    def _set_count(self, count: int) -> None:
        """Update the count, and recompute the fireflies if it changed."""
        if count != self.count:
            self.count = count
            self.fireflies = make_fireflies(count)

    def _run(self, pending: str, request: Callable[[], FireflyCount]) -> bool:
        """Make one request to the service, updating the page around it.

        :param pending: the status to show while the request is made.
        :param request: a method of the `.CounterClient` to call.

        :return: whether the request succeeded.
        """
        self._set_status(pending)
        try:
            response = request()
        except BackendNotReachableError:
            self._set_status(STATUS_UNREACHABLE)
            return False
        self._set_count(response.firefly_count)
        self._set_status(STATUS_READY)
        return True

    def load(self) -> bool:
        """Fetch the count from the service. This is done when the page opens.

        :return: whether the count was fetched.
        """
        return self._run(STATUS_LOADING, self.counter_client.get_count)

    def release_firefly(self) -> bool:
        """Release one firefly into the garden.

        :return: whether the service accepted the request.
        """
        return self._run(STATUS_RELEASING, self.counter_client.release)

    def reset_garden(self) -> bool:
        """Remove every firefly from the garden.

        :return: whether the service accepted the request.
        """
        return self._run(STATUS_RESETTING, self.counter_client.reset)

    def on_pointer_down(self) -> None:
        """Handle the user touching or clicking anywhere on the page.

        Audio may only start after the user has interacted with the page,
        so this is where playback begins.
        """
        for channel in self.audio_channels:
            channel.ensure_started()

    def set_audio(
        self,
        name: str,
        enabled: Optional[bool] = None,
        volume: Optional[float] = None,
    ) -> None:
        """Change the switch or slider of one audio channel.

        :param name: ``"music"`` or ``"forest"``.
        :param enabled: whether the channel should be audible, or ``None``
            to leave it unchanged.
        :param volume: the new volume, or ``None`` to leave it unchanged.

        :raise KeyError: if there is no channel called ``name``.
        :raise ValueError: if ``volume`` is not between 0 and 1.
        """
        channels = {c.name: c for c in self.audio_channels}
        if name not in channels:
            raise KeyError(f"There is no audio channel called {name!r}.")
        channel = channels[name]
        if enabled is not None:
            channel.enabled = enabled
        if volume is not None:
            channel.volume = volume
        _LOGGER.debug("Audio settings changed: %r", channel)
        self.render()
