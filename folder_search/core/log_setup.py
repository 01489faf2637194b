# File: folder_search/core/log_setup.py

import logging
from typing import Optional

from folder_search.core.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None, verbose: bool = False) -> None:
    """
    Configures the root logger once for CLI use.
    Library code only ever talks to module loggers.
    """
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName((level or settings.LOG_LEVEL).upper())
        # getLevelName returns a string for unknown names
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("folder_search").setLevel(resolved)
