"""Retrieve the objects owned by the `.GardenServer` from a request.

Request handlers never reach for module-level state. Instead, they declare
a dependency on the `.FireflyCounter`, which is looked up from the
`fastapi.FastAPI` application handling the request. Each app belongs to
exactly one `.GardenServer`, so each server has its own independent count.

The annotated type `.CounterDep` may be used as the type of an argument
to any endpoint that needs the counter.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, FastAPI, Request

from ..counter import FireflyCounter

if TYPE_CHECKING:
    from . import GardenServer


def find_garden_server(app: FastAPI) -> GardenServer:
    """Find the GardenServer associated with an app.

    :param app: The `fastapi.FastAPI` application that implements the
        `.GardenServer`, i.e. this is ``garden_server.app``.

    :return: the `.GardenServer` that owns the ``app``.

    :raise RuntimeError: if the app was not created by a `.GardenServer`.
    """
    server = getattr(app.state, "garden_server", None)
    if server is None:
        raise RuntimeError("No GardenServer found for this application.")
    return server


def counter_from_request(request: Request) -> FireflyCounter:
    """Retrieve the counter of the server handling a request.

    This is intended to be used as a FastAPI dependency.

    :param request: is supplied automatically by FastAPI.

    :return: the `.FireflyCounter` owned by the server.
    """
    return find_garden_server(request.app).counter


CounterDep = Annotated[FireflyCounter, Depends(counter_from_request)]
