"""Test that the CounterClient can use the counter service, and reports failures."""

from fastapi.testclient import TestClient
import httpx
import pytest

from firefly_garden import (
    BACKEND_URL,
    BackendNotReachableError,
    CounterClient,
    GardenServer,
)


@pytest.fixture
def counter_client():
    """Yield a CounterClient connected to a GardenServer."""
    server = GardenServer()
    with TestClient(server.app) as client:
        yield CounterClient(client=client)


def mock_client(handler) -> httpx.Client:
    """Make an httpx client that answers every request with ``handler``."""
    return httpx.Client(
        base_url="http://localhost:5179", transport=httpx.MockTransport(handler)
    )


def test_get_release_reset(counter_client):
    assert counter_client.get_count().firefly_count == 0
    assert counter_client.release().firefly_count == 1
    assert counter_client.release().firefly_count == 2
    assert counter_client.get_count().firefly_count == 2
    assert counter_client.reset().firefly_count == 0


def test_requests_sent():
    """Check the methods and paths used for each call."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append((request.method, request.url.path))
        return httpx.Response(
            200, json={"firefly_count": 3, "updated_at": "2024-06-01T12:00:00Z"}
        )

    client = CounterClient(client=mock_client(handler))
    client.get_count()
    client.release()
    client.reset()
    assert requests == [
        ("GET", "/api/fireflies"),
        ("POST", "/api/fireflies/release"),
        ("POST", "/api/fireflies/reset"),
    ]


def test_connection_refused():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = CounterClient(client=mock_client(handler))
    with pytest.raises(BackendNotReachableError) as excinfo:
        client.get_count()
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.parametrize("status", [404, 500, 503])
def test_error_status(status):
    client = CounterClient(client=mock_client(lambda r: httpx.Response(status)))
    with pytest.raises(BackendNotReachableError):
        client.release()


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"count": 1}',
        b'{"firefly_count": -1, "updated_at": "2024-06-01T12:00:00Z"}',
    ],
)
def test_bad_response_body(body):
    client = CounterClient(
        client=mock_client(lambda r: httpx.Response(200, content=body))
    )
    with pytest.raises(BackendNotReachableError):
        client.get_count()


def test_default_url():
    with CounterClient() as client:
        assert client.base_url == BACKEND_URL == "http://localhost:5179"
        assert client.client.base_url.host == "localhost"
        assert client.client.base_url.port == 5179


def test_injected_client_is_not_closed():
    http_client = mock_client(lambda r: httpx.Response(500))
    with CounterClient(client=http_client):
        pass
    assert not http_client.is_closed


def test_owned_client_is_closed():
    with CounterClient("http://localhost:1") as client:
        pass
    assert client.client.is_closed
