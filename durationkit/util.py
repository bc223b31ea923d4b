"""Unit constants and lookup helpers for durationkit.

Time unit constants represent durations in milliseconds.
Months and years are fixed approximations (30 and 365 days), not calendar lengths.
"""

from types import MappingProxyType

from durationkit.errors import UnsupportedUnitError

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000
MONTH = 2592000000
YEAR = 31536000000

# Unit labels ordered from largest to smallest
UNITS = MappingProxyType(
    {
        "y": YEAR,
        "mo": MONTH,
        "w": WEEK,
        "d": DAY,
        "h": HOUR,
        "m": MINUTE,
        "s": SECOND,
        "ms": MILLISECOND,
    }
)


def unit_to_milliseconds(unit: str) -> int:
    """Return the millisecond ratio for a unit label such as "h" or "mo".

    Raises:
        UnsupportedUnitError: If the label is not one of the known units
    """
    try:
        return UNITS[unit.lower()]
    except KeyError:
        raise UnsupportedUnitError(unit) from None
