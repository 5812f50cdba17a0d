"""Render the garden as an HTML page.

The page has the same structure as the garden shown in a browser: a header
with the firefly count, a stage with one element per firefly, and a panel
with the release and reset buttons, the status, and the audio switches and
sliders in their current state. Animation is left to the
stylesheet, which uses the per-firefly custom properties ``--dx`` and
``--dy`` for the drift.
"""

from __future__ import annotations
from html import escape
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .audio import AudioChannel
    from .garden import GardenClient

_LOGGER = logging.getLogger(__name__)

GARDEN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Firefly Garden</title>
    <link rel="stylesheet" href="/garden.css">
</head>
<body>
<div class="app">
{{audio}}
    <div class="bg"></div>
    <div class="forest"></div>
    <div class="vignette"></div>
    <div class="haze"></div>
    <header class="header">
        <div>
            <div class="title">Firefly Garden</div>
            <div class="subtitle">Release a light into the night.</div>
        </div>
        <div class="pill">
            <span class="pillLabel">Fireflies</span>
            <span class="pillValue">{{count}}</span>
        </div>
    </header>
    <main class="stage" aria-label="Firefly garden">
{{fireflies}}
        <div class="panel">
            <button class="btn primary">Release a Firefly</button>
            <button class="btn">Reset</button>
            <div class="status">{{status}}</div>
            <div class="audio">
{{audio_controls}}
                <div class="hint">
                    Tip: if audio doesn’t start, click/tap anywhere once
                    (browser autoplay rules).
                </div>
            </div>
        </div>
    </main>
</div>
</body>
</html>
"""


def render_audio_element(channel: AudioChannel) -> str:
    """Render one audio channel as an ``<audio>`` element.

    :param channel: the channel to render.

    :return: the HTML for the element.
    """
    attributes = [
        f'id="{escape(channel.name)}"',
        f'src="{escape(channel.source)}"',
        f'data-volume="{channel.volume}"',
    ]
    if channel.loop:
        attributes.append("loop")
    if not channel.enabled:
        attributes.append("muted")
    return f"    <audio {' '.join(attributes)}></audio>"


def render_audio_controls(channel: AudioChannel) -> str:
    """Render the switch and volume slider for one audio channel.

    The switch is checked if the channel is enabled, and the slider shows
    the channel's volume.

    :param channel: the channel to render.

    :return: the HTML for one row of audio controls.
    """
    name = escape(channel.name)
    checked = " checked" if channel.enabled else ""
    return (
        '                <div class="audioRow">\n'
        '                    <label class="switch">\n'
        f'                        <input type="checkbox" name="{name}"{checked}>\n'
        f"                        <span>{escape(channel.name.capitalize())}</span>\n"
        "                    </label>\n"
        f'                    <input class="slider" type="range" name="{name}" '
        f'min="0" max="1" step="0.01" value="{channel.volume}">\n'
        "                </div>"
    )


def render_garden_page(garden: GardenClient) -> str:
    """Render the current state of a garden as an HTML document.

    :param garden: the garden to render.

    :return: a complete HTML document.
    """
    fireflies = "\n".join(
        f'        <span class="firefly" style="{escape(f.style())}"></span>'
        for f in garden.fireflies
    )
    audio = "\n".join(render_audio_element(c) for c in garden.audio_channels)
    controls = "\n".join(render_audio_controls(c) for c in garden.audio_channels)
    content = GARDEN_PAGE
    content = content.replace("{{audio_controls}}", controls)
    content = content.replace("{{audio}}", audio)
    content = content.replace("{{count}}", str(garden.count))
    content = content.replace("{{fireflies}}", fireflies)
    content = content.replace("{{status}}", escape(garden.status))
    return content


class HtmlFileRenderer:
    """A renderer that writes the garden page to a file."""

    def __init__(self, path: str | Path) -> None:
        """Set up the renderer.

        :param path: where the page should be written. It is overwritten
            every time the garden is rendered.
        """
        self.path = Path(path)

    def __call__(self, garden: GardenClient) -> None:
        """Write the page for the garden's current state.

        :param garden: the garden to render.
        """
        self.path.write_text(render_garden_page(garden), encoding="utf-8")
        _LOGGER.debug("Wrote garden page to %s", self.path)
