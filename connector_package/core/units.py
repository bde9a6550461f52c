"""Codecs for the human-readable scalar types used in connector configs.

Byte sizes ride on ``pydantic.ByteSize`` (``"44mb"``, ``"1 MiB"``, ``1600``).
Durations follow the humantime grammar used by the connector runtime: one or
more ``<integer><unit>`` terms such as ``"1ms"`` or ``"1h 30m"``.
"""

import re
from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, ByteSize, PlainSerializer

_DECIMAL_UNITS = (
    ("eb", 10**18),
    ("pb", 10**15),
    ("tb", 10**12),
    ("gb", 10**9),
    ("mb", 10**6),
    ("kb", 10**3),
)
_BINARY_UNITS = (
    ("eib", 2**60),
    ("pib", 2**50),
    ("tib", 2**40),
    ("gib", 2**30),
    ("mib", 2**20),
    ("kib", 2**10),
)

_NANOS_PER_SECOND = 1_000_000_000

# Unit suffixes are case sensitive: "m" is minutes, "M" is months.
_DURATION_UNITS = {
    "ns": 1,
    "nsec": 1,
    "nanos": 1,
    "us": 1_000,
    "usec": 1_000,
    "micros": 1_000,
    "ms": 1_000_000,
    "msec": 1_000_000,
    "millis": 1_000_000,
    "s": _NANOS_PER_SECOND,
    "sec": _NANOS_PER_SECOND,
    "secs": _NANOS_PER_SECOND,
    "second": _NANOS_PER_SECOND,
    "seconds": _NANOS_PER_SECOND,
    "m": 60 * _NANOS_PER_SECOND,
    "min": 60 * _NANOS_PER_SECOND,
    "mins": 60 * _NANOS_PER_SECOND,
    "minute": 60 * _NANOS_PER_SECOND,
    "minutes": 60 * _NANOS_PER_SECOND,
    "h": 3_600 * _NANOS_PER_SECOND,
    "hr": 3_600 * _NANOS_PER_SECOND,
    "hrs": 3_600 * _NANOS_PER_SECOND,
    "hour": 3_600 * _NANOS_PER_SECOND,
    "hours": 3_600 * _NANOS_PER_SECOND,
    "d": 86_400 * _NANOS_PER_SECOND,
    "day": 86_400 * _NANOS_PER_SECOND,
    "days": 86_400 * _NANOS_PER_SECOND,
    "w": 604_800 * _NANOS_PER_SECOND,
    "week": 604_800 * _NANOS_PER_SECOND,
    "weeks": 604_800 * _NANOS_PER_SECOND,
    "M": 2_630_016 * _NANOS_PER_SECOND,
    "month": 2_630_016 * _NANOS_PER_SECOND,
    "months": 2_630_016 * _NANOS_PER_SECOND,
    "y": 31_557_600 * _NANOS_PER_SECOND,
    "year": 31_557_600 * _NANOS_PER_SECOND,
    "years": 31_557_600 * _NANOS_PER_SECOND,
}

# Largest unit first; used when formatting.
_FORMAT_UNITS = (
    ("d", timedelta(days=1)),
    ("h", timedelta(hours=1)),
    ("m", timedelta(minutes=1)),
    ("s", timedelta(seconds=1)),
    ("ms", timedelta(milliseconds=1)),
    ("us", timedelta(microseconds=1)),
)

_DURATION_RE = re.compile(r"^\s*(?:\d+\s*[A-Za-z]+\s*)+$")
_DURATION_TERM_RE = re.compile(r"(\d+)\s*([A-Za-z]+)")


def format_byte_size(value: int) -> int | str:
    """Format a byte count as the largest exact unit string, e.g. ``"44mb"``.

    Counts that no unit divides exactly are returned as a bare integer.
    """
    size = int(value)
    if size == 0:
        return 0
    for unit, multiplier in _DECIMAL_UNITS + _BINARY_UNITS:
        if size % multiplier == 0:
            return f"{size // multiplier}{unit}"
    return size


def reject_bool(value: Any) -> Any:
    """Refuse YAML booleans, which would otherwise coerce to 0 or 1 bytes."""
    if isinstance(value, bool):
        raise ValueError(f"invalid value: {value!r}, expected a byte size")
    return value


def parse_duration(value: Any) -> timedelta:
    """Parse a humantime duration string into a timedelta.

    Args:
        value: Duration string such as ``"1ms"`` or ``"2h 37min"``; an existing
            timedelta is returned unchanged.

    Returns:
        Parsed timedelta (sub-microsecond remainders are truncated)

    Raises:
        ValueError: If the value is not a duration string
    """
    if isinstance(value, timedelta):
        return value
    if not isinstance(value, str) or not _DURATION_RE.match(value):
        raise ValueError(f"invalid value: {value!r}, expected a duration")

    total_nanos = 0
    for amount, unit in _DURATION_TERM_RE.findall(value):
        multiplier = _DURATION_UNITS.get(unit)
        if multiplier is None:
            raise ValueError(f"unknown time unit {unit!r} in duration {value!r}")
        total_nanos += int(amount) * multiplier
    return timedelta(microseconds=total_nanos // 1_000)


def format_duration(value: timedelta) -> str:
    """Format a timedelta as compact humantime terms, e.g. ``"1h 30m"``."""
    if value < timedelta(0):
        raise ValueError(f"negative durations cannot be formatted: {value!r}")
    if not value:
        return "0s"

    terms = []
    remaining = value
    for unit, size in _FORMAT_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            terms.append(f"{count}{unit}")
    return " ".join(terms)


HumanByteSize = Annotated[
    ByteSize,
    BeforeValidator(reject_bool),
    PlainSerializer(format_byte_size),
]
"""Byte size accepting bare integers or unit strings, written back as a unit string."""

HumanDuration = Annotated[
    timedelta,
    BeforeValidator(parse_duration),
    PlainSerializer(format_duration),
]
"""Duration accepting humantime strings, written back in the same grammar."""
