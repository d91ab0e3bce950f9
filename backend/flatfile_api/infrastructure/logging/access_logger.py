"""Access logger — one line per handled HTTP request.

Two formats:
    dev       — short, ANSI-colored by status class:
                ``GET /api/v1/users 200 3.12 ms - 512``
    combined  — Apache combined log style for production log collectors.

Color scheme (dev):
    Green   — 2xx
    Cyan    — 3xx
    Yellow  — 4xx
    Red     — 5xx
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


def _status_color(status_code: int) -> str:
    if status_code >= 500:
        return _Colors.RED
    if status_code >= 400:
        return _Colors.YELLOW
    if status_code >= 300:
        return _Colors.CYAN
    return _Colors.GREEN


@dataclass
class AccessRecord:
    """What is known about a request once its response has been produced."""

    method: str
    path: str
    status_code: int
    elapsed_ms: float
    content_length: str | None = None
    client: str = "-"
    http_version: str = "1.1"
    referer: str = "-"
    user_agent: str = "-"


# ── AccessLogger ─────────────────────────────────────────────────────

class AccessLogger:
    """Formats and emits access lines on the ``flatfile_api.access`` logger.

    Usage:
        access = AccessLogger(colored=settings.is_development)
        access.log(AccessRecord("GET", "/api/v1/users", 200, 3.1, "512"))
    """

    def __init__(self, colored: bool = True, logger_name: str = "flatfile_api.access"):
        self._logger = logging.getLogger(logger_name)
        self._colored = colored

    def format(self, record: AccessRecord) -> str:
        if self._colored:
            return self._format_dev(record)
        return self._format_combined(record)

    def log(self, record: AccessRecord) -> None:
        self._logger.info(self.format(record))

    def _format_dev(self, record: AccessRecord) -> str:
        color = _status_color(record.status_code)
        return (
            f"{_Colors.BOLD}{record.method}{_Colors.RESET} {record.path} "
            f"{color}{record.status_code}{_Colors.RESET} "
            f"{_Colors.GRAY}{record.elapsed_ms:.2f} ms - {record.content_length or '-'}{_Colors.RESET}"
        )

    def _format_combined(self, record: AccessRecord) -> str:
        stamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S +0000")
        return (
            f'{record.client} - - [{stamp}] "{record.method} {record.path} '
            f'HTTP/{record.http_version}" {record.status_code} {record.content_length or "-"} '
            f'"{record.referer}" "{record.user_agent}"'
        )
