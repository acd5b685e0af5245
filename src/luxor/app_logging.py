"""Logging configuration helpers."""

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one stream handler to the ``luxor`` logger tree.

    Repeated calls only adjust the level, so app factories and tests can call
    this freely.
    """
    root = logging.getLogger("luxor")
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.propagate = False
