"""Application settings and their application to a live window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from qgomoku.backend.game import DEFAULT_BOARD_SIZE
from qgomoku.core.coords import BOARD_MARGIN, GRID_SIZE, STONE_RADIUS
from qgomoku.ui.i18n import set_language


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "INFO"

    # Board
    board_size: int = DEFAULT_BOARD_SIZE
    grid_px: int = GRID_SIZE
    margin_px: int = BOARD_MARGIN
    stone_radius_px: int = STONE_RADIUS
    hover_opacity: float = 0.5

    # Service
    request_timeout_ms: int | None = None  # None waits forever


def apply_settings(host: Any) -> None:
    """Push ``host._settings`` into a running MainWindow."""
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    host._service_session.set_request_timeout(s.request_timeout_ms)
