from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class Settings:
    """Process settings, read from `HELLOGUID_*` environment variables.

    - HELLOGUID_URL: an existing server to attach to ("" means none).
    - HELLOGUID_HOST / HELLOGUID_PORT: where `serve` binds.
    - HELLOGUID_LOG_LEVEL: logging level name for the CLI and uvicorn.
    """

    url: str = ""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _env_port() -> int:
    raw_port = os.getenv("HELLOGUID_PORT", "").strip()
    if not raw_port:
        return DEFAULT_PORT
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"HELLOGUID_PORT must be an integer, got {raw_port!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"HELLOGUID_PORT out of range: {port}")
    return port


def load_settings(*, port: int | None = None, log_level: str | None = None) -> Settings:
    """Read settings from the environment.

    Explicit `port` / `log_level` values (typically command-line flags) win, and the
    matching environment variable is then not read at all.
    """

    if port is None:
        port = _env_port()

    if log_level is None:
        log_level = (os.getenv("HELLOGUID_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).lower()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"HELLOGUID_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        url=normalize_base_url(os.getenv("HELLOGUID_URL", "")),
        host=os.getenv("HELLOGUID_HOST", "").strip() or DEFAULT_HOST,
        port=port,
        log_level=log_level,
    )
