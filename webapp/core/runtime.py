import time
from datetime import datetime, timezone

# Captured on first import, which happens while the process boots
_STARTED_AT = time.monotonic()


def uptime() -> float:
    """Seconds elapsed since the process started serving."""
    return max(0.0, time.monotonic() - _STARTED_AT)


def utc_timestamp() -> str:
    # e.g. 2024-05-01T12:00:00.123Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
