"""Shared logging configuration helpers for processes embedding the hasher."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""

    normalized_level = level.strip().upper() or "INFO"
    resolved = getattr(logging, normalized_level, logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure process logging with consistent format and runtime level."""

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
    )
