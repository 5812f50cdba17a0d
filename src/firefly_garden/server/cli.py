"""Command-line interface to the `.GardenServer`.

This module provides the command-line interface that is installed as
``firefly-garden-server``. With no arguments, it serves the counter on
``127.0.0.1``, using the port given by the ``PORT`` environment variable
or 5179 if that is not set. Configuration may also be supplied as a JSON
file or string, and ``--host``/``--port`` override whatever was loaded.
"""

from argparse import ArgumentParser, Namespace
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError
import uvicorn

from ..exceptions import ConfigurationError
from . import GardenServer
from . import fallback
from .config_model import DEFAULT_PORT, GardenServerConfig

_LOGGER = logging.getLogger(__name__)


def get_default_parser() -> ArgumentParser:
    """Return the default CLI parser for the counter service.

    :return: an `argparse.ArgumentParser` set up with the options for
        ``firefly-garden-server``.
    """
    parser = ArgumentParser(description="Serve the firefly counter over HTTP.")
    parser.add_argument("-c", "--config", type=str, help="Path to configuration file")
    parser.add_argument("-j", "--json", type=str, help="Configuration as JSON string")
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Serve an error page instead of exiting, if we can't start.",
    )
    parser.add_argument("--host", type=str, help="Bind socket to this host")
    parser.add_argument(
        "--port",
        type=int,
        help=(
            "Bind socket to this port. If 0, an available port will be picked. "
            "Defaults to $PORT, or 5179."
        ),
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> Namespace:
    r"""Process command line arguments for the server.

    The arguments are defined in `.get_default_parser`\ .

    :param argv: command line arguments (defaults to arguments supplied
        to the current command).

    :return: a namespace with the extracted options.
    """
    parser = get_default_parser()
    return parser.parse_args(argv)


def config_from_args(args: Namespace) -> GardenServerConfig:
    """Load the configuration from the command line arguments.

    Configuration is read from the file given with ``--config`` or the
    string given with ``--json``. If neither is given, the defaults are
    used. Finally, ``--host`` and ``--port`` replace the corresponding
    values, if they were specified.

    The ``PORT`` environment variable is only used if the port is not
    given on the command line or in the configuration.

    :param args: Parsed arguments from `.parse_args`.

    :return: the server configuration.

    :raise FileNotFoundError: if the configuration file specified is missing.
    :raise ConfigurationError: if both a config file and a string are provided,
        or if the configuration is not a JSON object.
    """
    if args.config and args.json:
        raise ConfigurationError("Can't use both --config and --json simultaneously.")
    if args.config:
        try:
            with open(args.config) as f:
                data = load_json_object(f.read())
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Could not find configuration file {args.config}"
            ) from e
    elif args.json:
        data = load_json_object(args.json)
    else:
        data = {}
    if args.host is not None:
        data["host"] = args.host
    if args.port is not None:
        data["port"] = args.port
    return GardenServerConfig.model_validate(data)


def load_json_object(text: str) -> dict:
    """Parse configuration supplied as JSON.

    :param text: the JSON to parse.

    :return: the parsed configuration, as a dictionary.

    :raise ConfigurationError: if ``text`` is not valid JSON, or is not an
        object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Configuration is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a JSON object.")
    return data


def serve_from_cli(
    argv: Optional[list[str]] = None, dry_run: bool = False
) -> GardenServer | None:
    r"""Start the server from the command line.

    This function will parse command line arguments, load configuration,
    set up a server, and start it. It calls `.parse_args`,
    `.config_from_args` and `.GardenServer.from_config` to get a server, then
    starts `uvicorn` to serve on the configured host and port.

    If the ``fallback`` argument is specified, errors that stop the
    server from starting will be handled by starting a simple
    HTTP server that shows an error page.

    If ``fallback`` is not specified, configuration errors are printed and
    we exit with status 3. Other errors are raised.

    :param argv: command line arguments (defaults to arguments supplied
        to the current command).
    :param dry_run: may be set to ``True`` to terminate after the server
        has been created, without starting `uvicorn`\ .

    :return: the `.GardenServer` instance created, if ``dry_run`` is ``True``.

    :raise BaseException: if the server cannot start, and the ``fallback``
        option is not specified.
    """
    args = parse_args(argv)
    try:
        config, server = None, None
        config = config_from_args(args)
        server = GardenServer.from_config(config)
        if dry_run:
            return server
        _LOGGER.info("Backend running on http://%s:%s", config.host, config.port)
        uvicorn.run(
            server.app, host=config.host, port=config.port, log_level=config.log_level
        )
    except BaseException as e:
        if args.fallback and not dry_run:
            print(f"Error: {e}")
            print("Starting fallback server.")
            app = fallback.app
            app.garden_config = config
            app.garden_server = server
            app.garden_error = e
            if config is not None:
                host, port = config.host, config.port
            else:
                host = args.host or "127.0.0.1"
                port = args.port if args.port is not None else DEFAULT_PORT
            uvicorn.run(app, host=host, port=port)
        else:
            if isinstance(e, (ValidationError, ConfigurationError)):
                print(f"Error reading Firefly Garden configuration:\n{e}")
                sys.exit(3)
            else:
                raise e
    return None  # This is required as we sometimes return the server
