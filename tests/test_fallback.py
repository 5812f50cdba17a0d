"""Test the fallback server.

If the server is started from the command line, with ``--fallback`` specified,
we start a lightweight fallback server to show an error message. This test
verifies that it works as expected.
"""

from fastapi.testclient import TestClient
import pytest

from firefly_garden import GardenServer, GardenServerConfig
from firefly_garden.server.fallback import app


@pytest.fixture(autouse=True)
def reset_fallback_app():
    """Clear anything a previous test stored on the fallback app."""
    app.garden_config = None
    app.garden_server = None
    app.garden_error = None
    yield


def test_fallback_empty():
    with TestClient(app) as client:
        response = client.get("/")
        html = response.text
        assert response.status_code == 500
        # test that something went wrong is shown
        assert "Something went wrong" in html
        assert "The counter service was not created." in html


def test_fallback_with_config():
    app.garden_config = GardenServerConfig(port=1234)
    with TestClient(app) as client:
        html = client.get("/").text
        assert "Something went wrong" in html
        assert '"port": 1234' in html


def test_fallback_with_error():
    app.garden_error = RuntimeError("Custom <error> message")
    with TestClient(app) as client:
        html = client.get("/").text
        assert "Something went wrong" in html
        assert "RuntimeError" in html
        assert "Custom &lt;error&gt; message" in html


def test_fallback_with_server():
    server = GardenServer()
    server.counter.release()
    app.garden_server = server
    with TestClient(app) as client:
        html = client.get("/").text
        assert "The counter service was created, with 1 fireflies." in html


def test_fallback_redirects():
    with TestClient(app) as client:
        response = client.get("/api/fireflies", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/"
