from .duration import Duration, RoundingMode
from .errors import (
    DivisionByZeroError,
    DuplicateUnitError,
    DurationError,
    EmptyInputError,
    NoTokensFoundError,
    UnexpectedTrailingInputError,
    UnsupportedUnitError,
)
from .util import (
    DAY,
    HOUR,
    MILLISECOND,
    MINUTE,
    MONTH,
    SECOND,
    UNITS,
    WEEK,
    YEAR,
    unit_to_milliseconds,
)

parse = Duration.parse

__all__ = [
    "Duration",
    "RoundingMode",
    "parse",
    "unit_to_milliseconds",
    "UNITS",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "DurationError",
    "EmptyInputError",
    "NoTokensFoundError",
    "DuplicateUnitError",
    "UnexpectedTrailingInputError",
    "UnsupportedUnitError",
    "DivisionByZeroError",
]
