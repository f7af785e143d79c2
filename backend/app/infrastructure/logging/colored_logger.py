"""Colored request logger — one ANSI-colored line per HTTP request.

Color scheme by status class:
    Green   — 2xx
    Cyan    — 3xx
    Yellow  — 4xx
    Red     — 5xx / unhandled errors
    Gray    — timing / client details
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
    CYAN = "\033[96m"
    GRAY = "\033[90m"


def _status_style(status_code: int) -> tuple[int, str]:
    """Log level and color for a response status."""
    if status_code >= 500:
        return logging.ERROR, _Colors.RED
    if status_code >= 400:
        return logging.WARNING, _Colors.YELLOW
    if status_code >= 300:
        return logging.INFO, _Colors.CYAN
    return logging.INFO, _Colors.GREEN


# ── RequestLogger ────────────────────────────────────────────────────

class RequestLogger:
    """Logs completed and failed requests, colored by status class.

    Usage:
        log = RequestLogger("app.requests")
        log.completed("GET", "/users", 200, 12.4, client="127.0.0.1")
    """

    def __init__(self, name: str = "app.requests", colors: bool = True):
        self._logger = logging.getLogger(name)
        self._colors = colors

    def _paint(self, color: str, text: str) -> str:
        if not self._colors:
            return text
        return f"{color}{text}{_Colors.RESET}"

    def completed(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        **kwargs: Any,
    ) -> None:
        """Log a request that produced a response."""
        level, color = _status_style(status_code)
        message = (
            f"{self._paint(_Colors.BOLD + color, f'{method} {path}')} "
            f"{self._paint(color, str(status_code))} "
            f"{self._paint(_Colors.GRAY, f'{duration_ms:.1f}ms')}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            message += f" {self._paint(_Colors.GRAY, f'({details})')}"
        self._logger.log(level, message)

    def failed(
        self,
        method: str,
        path: str,
        duration_ms: float,
        error: Exception,
    ) -> None:
        """Log a request that raised before a response could be produced."""
        message = (
            f"{self._paint(_Colors.BOLD + _Colors.RED, f'{method} {path}')} "
            f"{self._paint(_Colors.RED, 'failed')} "
            f"{self._paint(_Colors.GRAY, f'{duration_ms:.1f}ms')} "
            f"{self._paint(_Colors.DIM, f'→ {type(error).__name__}: {error}')}"
        )
        self._logger.error(message)
