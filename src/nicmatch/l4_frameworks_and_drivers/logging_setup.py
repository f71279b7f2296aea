"""Logging setup for the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the ``nicmatch`` logger: debug to stderr when verbose, debug to *log_file* when given.

    Without either, records are dropped; the CLI reports failures itself.
    """
    root = logging.getLogger('nicmatch')
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG)

    if verbose:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
        root.info('Debug logging started → %s', log_file)

    if not root.handlers:
        root.addHandler(logging.NullHandler())
