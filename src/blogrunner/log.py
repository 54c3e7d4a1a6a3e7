# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for BlogRunner."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

DEFAULT_LOG_LEVEL = os.getenv("BLOGRUNNER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str | None = None, *, error_log: str | None = None) -> None:
    """Configure standard logging for CLI/library use.

    When ``error_log`` is given, that file is truncated and receives ERROR records so
    probe failures can be picked up by the reporter after the run.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format=LOG_FORMAT,
    )
    if error_log:
        handler = logging.FileHandler(error_log, mode="w", encoding="utf-8")
        handler.setLevel(logging.ERROR)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)


@contextmanager
def log_section(name: str, *, log: logging.Logger | None = None) -> Iterator[None]:
    """Bracket a block of work with ``/== name ====`` banners."""
    target = log or logger
    target.info("/== %s ====", name)
    try:
        yield
    finally:
        target.info("\\== %s ====", name)


__all__ = ["log_section", "setup_logging"]
