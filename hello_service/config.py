"""Runtime settings read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from hello_service.errors import StartupError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    uvicorn_log_level: str = "warning"
    access_log: bool = False
    metrics_port: Optional[int] = None
    cpu_sample_interval: float = 5.0


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise StartupError(f"{name} must be an integer, got {raw!r}") from None
    if not 0 <= value <= 65535:
        raise StartupError(f"{name} must be between 0 and 65535, got {value}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise StartupError(f"{name} must be a boolean, got {raw!r}")


def get_settings() -> Settings:
    """Build settings from the environment.

    Environment variables:
        HOST: Bind address (default: 0.0.0.0)
        PORT: Listen port, 0 picks a free one (default: 8080)
        LOG_LEVEL: Application log level (default: INFO)
        UVICORN_LOG_LEVEL: Level for uvicorn's own loggers (default: warning)
        ACCESS_LOG: Enable the uvicorn access log (default: false)
        METRICS_PORT: Serve Prometheus metrics on this port (default: disabled)
        CPU_SAMPLE_INTERVAL: Seconds between CPU samples (default: 5)

    Raises:
        StartupError: if any value cannot be parsed
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        raise StartupError(f"LOG_LEVEL is not a valid level: {log_level!r}")

    raw_interval = os.getenv("CPU_SAMPLE_INTERVAL", "5")
    try:
        cpu_sample_interval = float(raw_interval)
    except ValueError:
        raise StartupError(f"CPU_SAMPLE_INTERVAL must be a number, got {raw_interval!r}") from None
    if cpu_sample_interval <= 0:
        raise StartupError("CPU_SAMPLE_INTERVAL must be positive")

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 8080),
        log_level=log_level,
        uvicorn_log_level=os.getenv("UVICORN_LOG_LEVEL", "warning").lower(),
        access_log=_bool_env("ACCESS_LOG", False),
        metrics_port=_int_env("METRICS_PORT", None),
        cpu_sample_interval=cpu_sample_interval,
    )
