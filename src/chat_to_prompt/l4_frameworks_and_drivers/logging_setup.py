"""Logging setup for the command-line driver."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def setup_logging(level: str = 'WARNING', log_file: Path | None = None) -> logging.Handler:
    """Attach a stderr or file handler to the ``ctp`` logger tree and return it."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('ctp')
    for old in list(root.handlers):  # the CLI owns the ctp tree
        root.removeHandler(old)
        old.close()
    root.setLevel(level)
    root.addHandler(handler)
    if log_file is not None:
        logging.getLogger('ctp.config').info('Logging started → %s', log_file)
    return handler
