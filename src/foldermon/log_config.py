"""Console logging setup. Call setup_logging() once at startup."""

import logging


class ConsoleHandler(logging.StreamHandler):
    """Stream handler installed by setup_logging(), writes to stderr."""
    pass


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Configure the root logger with a single console handler.

    Safe to call multiple times: later calls only change the level.
    """
    root: logging.Logger = logging.getLogger()
    root.setLevel(level)

    if any(isinstance(h, ConsoleHandler) for h in root.handlers):
        return

    fmt: logging.Formatter = logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s.%(funcName)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    console: ConsoleHandler = ConsoleHandler()
    console.setFormatter(fmt)
    root.addHandler(console)
