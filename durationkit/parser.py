"""Free-text duration parsing.

A duration string is a sequence of value/unit tokens such as "1h 30m" or
"2d4h". Values are unsigned decimals; units are matched case-insensitively.
"""

import logging
import re

from durationkit.errors import (
    DuplicateUnitError,
    EmptyInputError,
    NoTokensFoundError,
    UnexpectedTrailingInputError,
)
from durationkit.util import unit_to_milliseconds

logger = logging.getLogger(__name__)

# Two-letter labels come before their one-letter prefixes ("mo" before "m").
# Labels use ASCII classes so only ASCII letters match, in either case.
_TOKEN = re.compile(
    r"([0-9]+(?:\.[0-9]+)?)\s*([mM][sS]|[mM][oO]|[sShHdDwWyYmM])"
)


def parse_milliseconds(
    text: str, *, strict: bool = True, allow_partial: bool = False
) -> float:
    """Return the total number of milliseconds described by a duration string.

    Args:
        text: Input such as "1h 30m 15s"
        strict: Reject inputs that repeat a unit ("1d 2d")
        allow_partial: Ignore text that is not part of a duration token

    Raises:
        EmptyInputError: If the text is blank
        NoTokensFoundError: If no value/unit token is present
        DuplicateUnitError: If strict and a unit appears more than once
        UnexpectedTrailingInputError: If not allow_partial and other text remains
    """
    if not text.strip():
        raise EmptyInputError()

    seen: set[str] = set()
    total = 0.0
    matched = False

    for match in _TOKEN.finditer(text):
        matched = True
        raw_value, raw_unit = match.groups()
        unit = raw_unit.lower()

        if strict and unit in seen:
            raise DuplicateUnitError(unit)

        seen.add(unit)
        total += float(raw_value) * unit_to_milliseconds(unit)
        logger.debug("duration token %r -> %s%s", match.group(0), raw_value, unit)

    if not matched:
        raise NoTokensFoundError(text)

    remainder = _TOKEN.sub(" ", text).strip()
    if remainder and not allow_partial:
        raise UnexpectedTrailingInputError(remainder)

    logger.debug("parsed %r as %s ms", text, total)
    return total
