"""A client library for the firefly counter service.

`.CounterClient` wraps the three endpoints of the counter service, and
returns their responses as `.FireflyCount` models. It is used by the
`.GardenClient`, which adds the state and behaviour of the garden page.

Every way a request can fail is reported as a `.BackendNotReachableError`.
"""

from __future__ import annotations
import logging
from typing import Any, Optional
from typing_extensions import Self
import httpx

from ..exceptions import BackendNotReachableError
from ..models import FireflyCount

BACKEND_URL = "http://localhost:5179"
"""Where the counter service is expected to be running."""

_LOGGER = logging.getLogger(__name__)


class CounterClient:
    """A client for the firefly counter service.

    A `httpx.Client` may be supplied, which is useful for testing: a
    `fastapi.testclient.TestClient` is an `httpx.Client`, so requests can
    be sent to a `.GardenServer` without starting an HTTP server.
    """

    def __init__(
        self, base_url: str = BACKEND_URL, client: Optional[httpx.Client] = None
    ) -> None:
        """Create a client for the service at a particular URL.

        :param base_url: the URL of the counter service. Ignored if
            ``client`` is supplied, as requests are then relative to the
            client's own base URL.
        :param client: an optional `httpx.Client` to send requests with.
            If it is supplied, it will not be closed by `.close`.
        """
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.Client(base_url=base_url)

    def _request(self, method: str, path: str) -> FireflyCount:
        """Make a request and parse the response.

        :param method: the HTTP method to use.
        :param path: the path of the endpoint.

        :return: the response body, as a `.FireflyCount`.

        :raise BackendNotReachableError: if there is no response, the
            response has an error status, or the body is not understood.
        """
        try:
            r = self.client.request(method, path)
            r.raise_for_status()
            return FireflyCount.model_validate(r.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers both invalid JSON and pydantic.ValidationError
            _LOGGER.warning("%s %s failed: %s", method, path, e)
            raise BackendNotReachableError(
                f"{method} {path} failed: {e}"
            ) from e

    def get_count(self) -> FireflyCount:
        """Read the current number of fireflies.

        :return: the state of the garden.
        """
        return self._request("GET", "/api/fireflies")

    def release(self) -> FireflyCount:
        """Release a firefly.

        :return: the state of the garden, after the count is incremented.
        """
        return self._request("POST", "/api/fireflies/release")

    def reset(self) -> FireflyCount:
        """Remove every firefly from the garden.

        :return: the state of the garden, with a count of zero.
        """
        return self._request("POST", "/api/fireflies/reset")

    def close(self) -> None:
        """Close the underlying HTTP client, if it was created by this object."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


from .audio import AudioChannel, PlaybackElement, PlaybackState  # noqa: E402
from .garden import GardenClient  # noqa: E402

__all__ = [
    "BACKEND_URL",
    "CounterClient",
    "AudioChannel",
    "PlaybackElement",
    "PlaybackState",
    "GardenClient",
]
