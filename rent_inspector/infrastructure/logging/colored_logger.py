"""Colored store logger — ANSI-colored console logging for store operations.

Provides a StoreLogger with color-coded output per entity kind, making it
easy to follow writes to the inspection store in the terminal.

Color scheme:
    🟢 Green   — Success
    🟡 Yellow  — Stale reference / nothing to do
    🔴 Red     — Failed transaction
    🔵 Blue    — Reload / publish
    ⚪ Gray    — Details
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Store Scopes ─────────────────────────────────────────────────────

class StoreScope:
    """Predefined log scopes with colors and icons."""

    STORE = ("STORE", _Colors.WHITE, "🗄️")
    PROPERTY = ("PROPERTY", _Colors.CYAN, "🏠")
    RECORD = ("RECORD", _Colors.MAGENTA, "📋")
    ROOM = ("ROOM", _Colors.BLUE, "🚪")
    PHOTO = ("PHOTO", _Colors.YELLOW, "📷")
    PUBLISH = ("PUBLISH", _Colors.BLUE, "📡")


def _format_details(kwargs: dict[str, Any]) -> str:
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


# ── StoreLogger ──────────────────────────────────────────────────────

class StoreLogger:
    """Color-coded logger for inspection store operations.

    Usage:
        log = StoreLogger("InspectionStore")
        log.success(StoreScope.RECORD, "Record created", record_id=record.id)
        log.not_found(StoreScope.ROOM, "Room not found", room_id=room_id)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def success(self, scope: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = scope
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✅ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.info(formatted)

    def not_found(self, scope: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a stale-reference no-op in yellow."""
        label, _, icon = scope
        formatted = (
            f"{_Colors.YELLOW}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.YELLOW}⚠️ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.warning(formatted)

    def failure(
        self, scope: tuple[str, str, str], message: str, error: Exception | None = None
    ) -> None:
        """Log a failed operation in red."""
        label, _, icon = scope
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.DIM}({details}){_Colors.RESET}"
        self._logger.debug(formatted)

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{_Colors.GRAY}{k}: {v}" for k, v in kwargs.items()]
        formatted = f"   {_Colors.GRAY}📊 {' | '.join(parts)}{_Colors.RESET}"
        self._logger.info(formatted)
