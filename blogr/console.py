"""Status messages for the command line."""

import sys


def success(message: str) -> None:
    """Print a success message."""
    print(f"✅ {message}")


def error(message: str) -> None:
    """Print an error message to standard error."""
    print(f"❌ {message}", file=sys.stderr)


def warn(message: str) -> None:
    """Print a warning message."""
    print(f"⚠️  {message}")


def info(message: str) -> None:
    """Print an informational message."""
    print(f"ℹ️  {message}")


def step(current: int, total: int, message: str) -> None:
    """Print a progress step such as ``[1/3] message``."""
    print(f"[{current}/{total}] {message}")