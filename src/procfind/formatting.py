"""Human-readable formatting of sizes and durations."""

from procfind.config import BYTE_UNITS


def format_bytes(size: int) -> str:
    """Format bytes as a human-readable string, e.g. "1.50 MB"."""
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {BYTE_UNITS[unit]}"


def format_duration(milliseconds: int) -> str:
    """Format a duration as its largest nonzero unit, e.g. "5h" or "42s"."""
    seconds = milliseconds // 1000
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    if days > 0:
        return f"{days}d"
    if hours > 0:
        return f"{hours}h"
    if minutes > 0:
        return f"{minutes}m"
    return f"{seconds}s"
