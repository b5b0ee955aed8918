from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: str | None = None) -> None:
    """
    Configure root logging for the service.

    Modules log through `logging.getLogger(__name__)`; this only decides level and output.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
