"""Logging configuration for Firefly Garden.

Every module in the package logs through a logger obtained with
``logging.getLogger(__name__)``, so all messages end up under the
`.GARDEN_LOGGER`. This module sets that logger up with a single handler,
which is done when a `.GardenServer` is created or a CLI starts.
"""

import logging

GARDEN_LOGGER = logging.getLogger("firefly_garden")
"""The parent logger of every logger in this package."""

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class GardenLogHandler(logging.StreamHandler):
    """A stream handler that marks itself as belonging to Firefly Garden.

    Having a distinct class lets `.configure_garden_logger` recognise a
    handler it added earlier, so it is not added twice.
    """


def configure_garden_logger(level: int | str = logging.INFO) -> None:
    """Set the level of the garden logger and give it a handler.

    This is safe to call more than once: subsequent calls will only
    change the level.

    :param level: the logging level, either as an integer or as a name
        such as ``"debug"``. Names are not case sensitive.
    """
    if isinstance(level, str):
        level = level.upper()
    GARDEN_LOGGER.setLevel(level)
    if not any(isinstance(h, GardenLogHandler) for h in GARDEN_LOGGER.handlers):
        handler = GardenLogHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        GARDEN_LOGGER.addHandler(handler)
