import platform
import socket
import sys
from datetime import datetime, timezone


def now_iso() -> str:
    """UTC timestamp in the ``2024-01-01T00:00:00.000Z`` form."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def hostname() -> str:
    return socket.gethostname()


def runtime_version() -> str:
    return f"Python {platform.python_version()}"


def platform_id() -> str:
    return sys.platform
