"""Logging setup for tablegen.

Every module obtains its logger through :func:`get_logger`, so all records
end up under the ``tablegen`` namespace and share one handler.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tablegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``tablegen`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Configured ``logging.Logger`` instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level for the ``tablegen`` logger.

    Returns:
        The package root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)

    return root
