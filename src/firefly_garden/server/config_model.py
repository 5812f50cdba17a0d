r"""Pydantic models to enable server configuration to be loaded from file.

The `.GardenServerConfig` model describes everything needed to start a
`.GardenServer`\ . It is used by the `.cli` module to start servers based on
configuration files, JSON strings, or just the defaults.

The port may also be set with the ``PORT`` environment variable, which is
the usual way of configuring it when the service runs in a container. The
variable is only consulted if no port is given explicitly, and its value is
validated like any other port, so a bad value is a `pydantic.ValidationError`\ .
"""

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

DEFAULT_PORT = 5179
"""The port used if neither the configuration nor ``PORT`` specify one."""

PORT_ENVIRONMENT_VARIABLE = "PORT"

LogLevel = Literal["critical", "error", "warning", "info", "debug"]


def port_from_environment() -> str | None:
    r"""Read the port from the ``PORT`` environment variable.

    :return: the value of ``PORT``, or ``None`` if it is unset or empty.
        The value is not converted to an integer here: that is left to
        `.GardenServerConfig`\ , so errors are reported with the rest of
        the configuration.
    """
    return os.environ.get(PORT_ENVIRONMENT_VARIABLE) or None


class GardenServerConfig(BaseModel):
    r"""The configuration parameters for a `.GardenServer`\ ."""

    host: str = Field(
        default="127.0.0.1",
        description="The interface the server should listen on.",
    )

    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        description=(
            """The port the server should listen on.

            If 0, an available port will be picked. If this is not set, the
            ``PORT`` environment variable is used, falling back to 5179.
            """
        ),
    )

    allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description=(
            """Origins that may make cross-origin requests.

            The garden page is usually served from a different origin to the
            counter service, so by default any origin is allowed.
            """
        ),
    )

    log_level: LogLevel = Field(
        default="info",
        description="The level of messages logged by the server.",
    )

    @model_validator(mode="before")
    @classmethod
    def port_default_from_environment(cls, data: Any) -> Any:
        """Use ``PORT`` as the port, if no port was supplied.

        :param data: the raw input to the model.

        :return: the input, with ``port`` filled in from the environment
            if it was missing.
        """
        if isinstance(data, dict) and "port" not in data:
            env_port = port_from_environment()
            if env_port is not None:
                data = {**data, "port": env_port}
        return data
