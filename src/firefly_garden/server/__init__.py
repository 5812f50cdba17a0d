"""Code supporting the counter service.

The counter service wraps a `fastapi.FastAPI` application in a
`.GardenServer`, which owns the `.FireflyCounter` and serves it over HTTP.
"""

from __future__ import annotations
from typing import AsyncGenerator, Optional
import logging

from contextlib import asynccontextmanager
from collections.abc import Sequence
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..counter import FireflyCounter
from ..logs import configure_garden_logger
from .config_model import GardenServerConfig
from .routes import fireflies_router

_LOGGER = logging.getLogger(__name__)


class GardenServer:
    """Use FastAPI to serve the firefly counter.

    There are several functions of a `.GardenServer`:

    * Own the `.FireflyCounter`. The counter is created along with the
      server and discarded with it, so every server starts from zero.
    * Make the counter available to request handlers, which retrieve it
      with the `.CounterDep` dependency.
    * Configure the server to allow cross-origin requests (required because
      the garden page is not served from the counter service).
    """

    def __init__(
        self,
        allow_origins: Optional[Sequence[str]] = None,
        log_level: int | str = logging.INFO,
    ) -> None:
        """Initialise a counter service.

        Setting up the `.GardenServer` involves creating the underlying
        `fastapi.FastAPI` app, setting its lifespan function, configuring
        it to allow cross-origin requests and adding the API routes.

        :param allow_origins: the origins allowed to make cross-origin
            requests. By default, any origin is allowed.
        :param log_level: the level of messages logged by the garden.
        """
        self.counter = FireflyCounter()
        self.app = FastAPI(title="Firefly Garden", lifespan=self.lifespan)
        self.app.state.garden_server = self
        self.allow_origins = list(allow_origins) if allow_origins else ["*"]
        self.set_cors_middleware()
        self.app.include_router(fireflies_router)
        # Note: this is safe to call multiple times.
        configure_garden_logger(log_level)

    app: FastAPI
    counter: FireflyCounter

    @classmethod
    def from_config(cls, config: GardenServerConfig | dict) -> GardenServer:
        r"""Create a GardenServer from a configuration model or dictionary.

        :param config: a `.GardenServerConfig`\ , or a dictionary that
            will be validated as one.

        :return: a `.GardenServer`\ . It will not be started by this
            function.

        :raise pydantic.ValidationError: if the configuration is invalid.
        """
        if not isinstance(config, GardenServerConfig):
            config = GardenServerConfig.model_validate(config)
        return cls(allow_origins=config.allow_origins, log_level=config.log_level)

    def set_cors_middleware(self) -> None:
        """Configure the server to allow requests from other origins.

        This is required to allow the garden page access to the HTTP API,
        as it is served from a different origin to the counter service.
        """
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=self.allow_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncGenerator[None]:
        """Log when the server starts and stops serving.

        This method is used as a lifespan function for the FastAPI app. See
        the lifespan_ page in FastAPI's documentation.

        .. _lifespan: https://fastapi.tiangolo.com/advanced/events/#lifespan-function

        :param app: The FastAPI application wrapped by the server.
        :yield: no value. The FastAPI application will serve requests while this
            function yields.
        """
        _LOGGER.info("Firefly garden open with %d fireflies", self.counter.count)
        try:
            yield
        finally:
            _LOGGER.info(
                "Firefly garden closed, %d fireflies forgotten", self.counter.count
            )
