r"""Ambient audio channels for the garden.

The garden has two looping sound layers, music and forest ambience. Each is
an `.AudioChannel`\ , which stores whether it is enabled and how loud it is,
and applies those preferences to a `.PlaybackElement` if one is attached.

Browsers will not start audio before the user has interacted with the page,
so playback is started lazily: each channel begins in
`.PlaybackState.NOT_STARTED` and moves to `.PlaybackState.STARTED` the
first time `.AudioChannel.ensure_started` is called. Later calls do
nothing. If playback refuses to start, the error is logged and ignored:
the garden works perfectly well in silence.
"""

from __future__ import annotations
from enum import Enum
import logging
from typing import Optional, Protocol

_LOGGER = logging.getLogger(__name__)


class PlaybackElement(Protocol):
    """Something that can play a looping sound, like an HTML audio element."""

    volume: float
    muted: bool

    def play(self) -> None:
        """Start playing. This may raise an exception if playback is refused."""
        ...


class PlaybackState(Enum):
    """Whether a channel has been asked to start playing."""

    NOT_STARTED = "not_started"
    STARTED = "started"


class AudioChannel:
    """One ambient sound layer, with its on/off switch and volume slider."""

    def __init__(
        self,
        name: str,
        source: str,
        volume: float,
        enabled: bool = True,
        element: Optional[PlaybackElement] = None,
    ) -> None:
        """Create an audio channel.

        :param name: a short name for the channel, e.g. ``"music"``.
        :param source: the URL of the sound file.
        :param volume: the initial volume, between 0 and 1.
        :param enabled: whether the channel is initially audible.
        :param element: the element that plays the sound. This may be
            attached later, using `.attach`.

        :raise ValueError: if ``volume`` is not between 0 and 1.
        """
        self.name = name
        self.source = source
        self.loop = True
        self._volume = _check_volume(volume)
        self._enabled = enabled
        self.state = PlaybackState.NOT_STARTED
        self.element: Optional[PlaybackElement] = None
        if element is not None:
            self.attach(element)

    @property
    def volume(self) -> float:
        """The volume of this channel, between 0 and 1."""
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = _check_volume(value)
        if self.element is not None:
            self.element.volume = self._volume

    @property
    def enabled(self) -> bool:
        """Whether this channel is audible. A disabled channel is muted."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        if self.element is not None:
            self.element.muted = not self._enabled

    def attach(self, element: PlaybackElement) -> None:
        """Attach the element that plays this channel's sound.

        The channel's current volume and mute state are applied to the
        element immediately.

        :param element: the element that plays the sound.
        """
        self.element = element
        element.volume = self._volume
        element.muted = not self._enabled

    def ensure_started(self) -> None:
        """Start playback, if this is the first time we've been asked to.

        This should be called whenever the user interacts with the page.
        Only the first call has any effect.
        """
        if self.state is PlaybackState.STARTED:
            return
        self.state = PlaybackState.STARTED
        if self.element is None:
            return
        try:
            self.element.play()
        except Exception as e:  # noqa: BLE001
            # A refused start leaves the channel silent
            _LOGGER.debug("Could not start %s audio: %s", self.name, e)

    def __repr__(self) -> str:
        return (
            f"AudioChannel({self.name!r}, enabled={self._enabled}, "
            f"volume={self._volume}, state={self.state.value})"
        )


def _check_volume(value: float) -> float:
    """Ensure a volume is between 0 and 1.

    :param value: the requested volume.

    :return: the volume, as a float.

    :raise ValueError: if the volume is out of range.
    """
    value = float(value)
    if not 0 <= value <= 1:
        raise ValueError(f"Volume must be between 0 and 1, not {value}.")
    return value
