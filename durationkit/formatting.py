"""Compact multi-unit rendering of millisecond values."""

import math

from durationkit.util import MILLISECOND, UNITS

# Fractional milliseconds are shown with at most this many decimals
_MAX_DECIMALS = 6


def format_milliseconds(value: float) -> str:
    """Render a millisecond value as a string like "1h 30m" or "-2d 0.5ms".

    Whole counts are emitted from years down to seconds, skipping units with a
    zero count. Whatever is left is emitted as a final "ms" segment, which may
    be fractional.
    """
    if value == 0:
        return "0ms"
    if not math.isfinite(value):
        return f"{value}ms"

    sign = "-" if value < 0 else ""
    remaining = abs(value)
    parts: list[str] = []

    for label, ratio in UNITS.items():
        if ratio == MILLISECOND:
            if remaining > 0:
                parts.append(f"{_format_number(remaining)}ms")
            break

        count = math.floor(remaining / ratio)
        if count > 0:
            parts.append(f"{count}{label}")
            remaining -= count * ratio

    return sign + " ".join(parts)


def _format_number(value: float) -> str:
    """Print integers bare and fractions with trailing zeros trimmed."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{_MAX_DECIMALS}f}".rstrip("0").rstrip(".")
