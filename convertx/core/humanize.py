"""Byte-count and duration helpers for the bytes and time commands"""

from typing import List

from .exceptions import ValidationError

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
BYTES_IN_KB = 1024.0

# Counts are unsigned 64-bit integers
U64_MAX = 2 ** 64 - 1

SECONDS_IN_MINUTE = 60
MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 24


def _require_count(value: int, field_name: str) -> None:
    if value < 0:
        raise ValidationError(f"'{field_name}' must be non-negative, got {value}", field_name, value)
    if value > U64_MAX:
        raise ValidationError(f"'{field_name}' must not exceed {U64_MAX}", field_name, value)


def bytes_to_mb(num_bytes: int) -> float:
    """
    Convert a byte count to megabytes (1024 * 1024 bytes)

    Raises:
        ValidationError: If num_bytes is negative or exceeds U64_MAX
    """
    _require_count(num_bytes, 'num_bytes')
    return num_bytes / (BYTES_IN_KB * BYTES_IN_KB)


def bytes_to_human_readable(num_bytes: int) -> str:
    """
    Render a byte count with the largest unit keeping the magnitude below 1024

    Examples:
        1023 -> "1023.00 B", 1024 -> "1.00 KB", 1048576 -> "1.00 MB"

    Raises:
        ValidationError: If num_bytes is negative or exceeds U64_MAX
    """
    _require_count(num_bytes, 'num_bytes')

    magnitude = float(num_bytes)
    idx = 0
    while magnitude >= BYTES_IN_KB and idx < len(BYTE_UNITS) - 1:
        magnitude /= BYTES_IN_KB
        idx += 1

    return f"{magnitude:.2f} {BYTE_UNITS[idx]}"


def seconds_to_human_readable(seconds: int) -> str:
    """
    Break a duration into days, hours, minutes and seconds

    Zero components are omitted; seconds are always shown when every
    other component is zero.

    Examples:
        0 -> "0s", 61 -> "1m 1s", 90061 -> "1d 1h 1m 1s"

    Raises:
        ValidationError: If seconds is negative or exceeds U64_MAX
    """
    _require_count(seconds, 'seconds')

    minutes, secs = divmod(seconds, SECONDS_IN_MINUTE)
    hours, minutes = divmod(minutes, MINUTES_IN_HOUR)
    days, hours = divmod(hours, HOURS_IN_DAY)

    parts: List[str] = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")

    return " ".join(parts)
