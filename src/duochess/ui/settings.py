"""User-configurable display settings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _LOGGER.warning("Ignoring invalid boolean for %s: %r", name, raw)
    return default


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True
    show_labels: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> AppSettings:
        """Build settings from ``DUOCHESS_*`` environment variables."""
        defaults = cls()
        return cls(
            board_theme=environ.get("DUOCHESS_THEME", defaults.board_theme),
            show_legal_moves=_parse_bool(
                "DUOCHESS_SHOW_MOVES",
                environ.get("DUOCHESS_SHOW_MOVES"),
                defaults.show_legal_moves,
            ),
            show_labels=defaults.show_labels,
            log_level=environ.get("DUOCHESS_LOG_LEVEL", defaults.log_level).upper(),
        )
