"""Process uptime and wall-clock timestamps for the health endpoint."""
from __future__ import annotations

import os
import time
from datetime import datetime, timezone

import psutil

# Seconds the process had already been alive when this module was imported,
# anchored to the monotonic clock so later readings never go backwards.
_ALIVE_AT_IMPORT = max(0.0, time.time() - psutil.Process(os.getpid()).create_time())
_MONOTONIC_AT_IMPORT = time.monotonic()


def uptime_seconds() -> float:
    """Seconds elapsed since the OS started this process."""
    return _ALIVE_AT_IMPORT + (time.monotonic() - _MONOTONIC_AT_IMPORT)


def utc_timestamp(now: datetime | None = None) -> str:
    """Format *now* (default: current time) as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
