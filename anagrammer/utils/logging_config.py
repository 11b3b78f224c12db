"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "ANAGRAM_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None, default: int) -> int:
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, default)


def configure_logging(
    level: Optional[str | int] = None,
    *,
    default: int = logging.WARNING,
    force: bool = False,
) -> int:
    """Install the root handler once and return the effective level.

    Results are written to stdout, so log records go to stderr (the
    ``basicConfig`` default). The level comes from ``level``, then the
    ``ANAGRAM_LOG_LEVEL`` environment variable, then ``default``.
    """

    global _CONFIGURED

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    resolved_level = _resolve_level(level if level is not None else env_level, default)

    if _CONFIGURED and not force:
        logging.getLogger("anagrammer").setLevel(resolved_level)
        return resolved_level

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("anagrammer").setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging"]
