"""Logging setup shared by the web app and scripts."""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVEL_ENV = "GRAPHBREWER_LOG_LEVEL"


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    """
    Configure root logging once.  `level` wins over the GRAPHBREWER_LOG_LEVEL
    environment variable, which wins over INFO.  Returns the numeric level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("graphbrewer").setLevel(level)
    return level
