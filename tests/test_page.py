"""Test rendering the garden as an HTML page."""

import httpx

from firefly_garden import CounterClient
from firefly_garden.client.garden import GardenClient
from firefly_garden.client.page import HtmlFileRenderer, render_garden_page


def client_with_count(count: int) -> CounterClient:
    """Make a CounterClient for a fake service that always reports ``count``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"firefly_count": count, "updated_at": "2024-06-01T12:00:00Z"}
        )

    return CounterClient(
        client=httpx.Client(
            base_url="http://localhost:5179", transport=httpx.MockTransport(handler)
        )
    )


def test_page_contents():
    garden = GardenClient(client_with_count(5))
    garden.load()
    html = render_garden_page(garden)
    assert "<title>Firefly Garden</title>" in html
    assert "Release a light into the night." in html
    assert '<span class="pillValue">5</span>' in html
    assert html.count('class="firefly"') == 5
    assert '<div class="status">Ready</div>' in html
    for firefly in garden.fireflies:
        assert f"left: {firefly.x}%" in html


def test_page_caps_fireflies():
    garden = GardenClient(client_with_count(1000))
    garden.load()
    html = render_garden_page(garden)
    assert '<span class="pillValue">1000</span>' in html
    assert html.count('class="firefly"') == 120


def test_page_audio_elements():
    garden = GardenClient(client_with_count(0))
    garden.set_audio("forest", enabled=False)
    html = render_garden_page(garden)
    assert '<audio id="music" src="/audio/music.mp3" data-volume="0.35" loop>' in html
    assert (
        '<audio id="forest" src="/audio/forest.mp3" data-volume="0.45" loop muted>'
        in html
    )


def test_page_panel_controls():
    garden = GardenClient(client_with_count(0))
    html = render_garden_page(garden)
    assert '<button class="btn primary">Release a Firefly</button>' in html
    assert '<button class="btn">Reset</button>' in html
    assert "<span>Music</span>" in html
    assert "<span>Forest</span>" in html
    assert "click/tap anywhere once" in html
    # Both channels start enabled, at their default volumes
    assert '<input type="checkbox" name="music" checked>' in html
    assert '<input type="checkbox" name="forest" checked>' in html
    assert 'name="music" min="0" max="1" step="0.01" value="0.35">' in html
    assert 'name="forest" min="0" max="1" step="0.01" value="0.45">' in html


def test_page_panel_reflects_audio_settings():
    garden = GardenClient(client_with_count(0))
    garden.set_audio("music", volume=0.6)
    garden.set_audio("forest", enabled=False, volume=0.1)
    html = render_garden_page(garden)
    assert '<input type="checkbox" name="music" checked>' in html
    assert '<input type="checkbox" name="forest">' in html
    assert 'name="music" min="0" max="1" step="0.01" value="0.6">' in html
    assert 'name="forest" min="0" max="1" step="0.01" value="0.1">' in html


def test_html_file_renderer(tmp_path):
    path = tmp_path / "garden.html"
    garden = GardenClient(client_with_count(2), renderer=HtmlFileRenderer(path))
    garden.load()
    html = path.read_text(encoding="utf-8")
    assert html == render_garden_page(garden)
    assert html.count('class="firefly"') == 2
