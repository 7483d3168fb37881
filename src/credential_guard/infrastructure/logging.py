"""Shared logging configuration helpers for credential-guard processes."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map one level name to its numeric value, falling back to INFO."""

    normalized_level = level.strip().upper() or "INFO"
    resolved_level = logging.getLevelName(normalized_level)
    if not isinstance(resolved_level, int):
        return logging.INFO
    return resolved_level


def configure_logging(*, level: str) -> int:
    """Configure process logging with the shared format and return the level used."""

    resolved_level = resolve_log_level(level)
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(resolved_level)
    return resolved_level
