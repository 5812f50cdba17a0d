"""Command-line interface to the garden, installed as ``firefly-garden``.

This opens the garden in the same way the page does, optionally releases a
firefly or resets the garden, then reports the count and status. The page
itself may be written to a file with ``--html``.
"""

from argparse import ArgumentParser, Namespace
import sys
from typing import Optional

from ..logs import configure_garden_logger
from . import BACKEND_URL, CounterClient
from .garden import STATUS_UNREACHABLE, GardenClient
from .page import HtmlFileRenderer

ACTIONS = ("show", "release", "reset")


def get_default_parser() -> ArgumentParser:
    """Return the CLI parser for ``firefly-garden``.

    :return: an `argparse.ArgumentParser` set up with the client options.
    """
    parser = ArgumentParser(description="Visit the firefly garden.")
    parser.add_argument(
        "action",
        nargs="?",
        choices=ACTIONS,
        default="show",
        help="What to do once the garden has loaded.",
    )
    parser.add_argument(
        "--url", type=str, default=BACKEND_URL, help="URL of the counter service"
    )
    parser.add_argument(
        "--html", type=str, help="Write the garden page to this file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and audio events"
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> Namespace:
    """Process command line arguments for the client.

    :param argv: command line arguments (defaults to arguments supplied
        to the current command).

    :return: a namespace with the extracted options.
    """
    return get_default_parser().parse_args(argv)


def visit_from_cli(
    argv: Optional[list[str]] = None, counter_client: Optional[CounterClient] = None
) -> GardenClient:
    """Load the garden, perform the requested action and report the result.

    :param argv: command line arguments (defaults to arguments supplied
        to the current command).
    :param counter_client: a client to use instead of one created from
        ``--url``. This is mostly useful for testing.

    :return: the garden, in its final state.
    """
    args = parse_args(argv)
    configure_garden_logger("debug" if args.verbose else "warning")
    renderer = HtmlFileRenderer(args.html) if args.html else None
    with counter_client or CounterClient(args.url) as client:
        garden = GardenClient(client, renderer=renderer)
        if garden.load():
            if args.action == "release":
                garden.release_firefly()
            elif args.action == "reset":
                garden.reset_garden()
    print(f"Fireflies: {garden.count} ({garden.status})")
    return garden


def main(argv: Optional[list[str]] = None) -> None:
    """Run ``firefly-garden``.

    :param argv: command line arguments (defaults to arguments supplied
        to the current command).

    :raise SystemExit: with status 1, if the counter service could not be
        reached.
    """
    garden = visit_from_cli(argv)
    if garden.status == STATUS_UNREACHABLE:
        sys.exit(1)
