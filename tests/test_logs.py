"""Unit tests for the `.logs` module."""

import logging

from fastapi.testclient import TestClient
import httpx

from firefly_garden import CounterClient, GardenClient, GardenServer, logs


def reset_garden_logger():
    """Remove all handlers from the GARDEN_LOGGER to reset it."""
    logger = logs.GARDEN_LOGGER
    # Note that the [:] below is important: this copies the list and avoids
    # issues with modifying a list as we're iterating through it.
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    assert len(logger.handlers) == 0


def test_configure_garden_logger():
    """Check the logger is configured correctly."""
    reset_garden_logger()
    logs.configure_garden_logger()
    assert logs.GARDEN_LOGGER.level == logging.INFO
    assert len(logs.GARDEN_LOGGER.handlers) == 1
    assert isinstance(logs.GARDEN_LOGGER.handlers[0], logs.GardenLogHandler)


def test_configure_twice():
    """Configuring again changes the level but doesn't add a handler."""
    reset_garden_logger()
    logs.configure_garden_logger()
    logs.configure_garden_logger("debug")
    assert logs.GARDEN_LOGGER.level == logging.DEBUG
    assert len(logs.GARDEN_LOGGER.handlers) == 1
    logs.configure_garden_logger(logging.WARNING)
    assert logs.GARDEN_LOGGER.level == logging.WARNING


def test_server_logs(caplog):
    """The server logs when it opens, resets and closes."""
    server = GardenServer()
    with caplog.at_level(logging.INFO, logger="firefly_garden"):
        with TestClient(server.app) as client:
            client.post("/api/fireflies/release")
            client.post("/api/fireflies/release")
            client.post("/api/fireflies/reset")
    assert "Firefly garden open with 0 fireflies" in caplog.text
    assert "Garden reset (2 fireflies removed)" in caplog.text
    assert "Firefly garden closed, 0 fireflies forgotten" in caplog.text


def test_client_logs_failures(caplog):
    def handler(request):
        return httpx.Response(503)

    client = CounterClient(
        client=httpx.Client(
            base_url="http://test", transport=httpx.MockTransport(handler)
        )
    )
    with caplog.at_level(logging.WARNING, logger="firefly_garden"):
        GardenClient(client).load()
    assert "GET /api/fireflies failed" in caplog.text
