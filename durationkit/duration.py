import math
import sys
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Literal, TypeAlias

from typing_extensions import override

from durationkit.errors import DivisionByZeroError
from durationkit.formatting import format_milliseconds
from durationkit.parser import parse_milliseconds
from durationkit.util import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    unit_to_milliseconds,
)

RoundingMode: TypeAlias = Literal["round", "floor", "ceil"]

Number: TypeAlias = int | float


def _round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


_ROUNDERS = {
    "round": _round_half_away,
    "floor": math.floor,
    "ceil": math.ceil,
}


def _apply_precision(
    value: float, precision: int | None, rounding: RoundingMode
) -> float:
    """Round value to a number of decimal places using the given mode."""
    if rounding not in _ROUNDERS:
        raise ValueError(
            f"rounding must be one of 'round', 'floor', 'ceil', got {rounding!r}"
        )
    if precision is None:
        return value
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        raise ValueError(
            f"precision must be a non-negative integer, got {precision!r}.\n"
            f"Example: duration.hours(precision=2) for two decimal places"
        )
    if precision > sys.float_info.max_10_exp:
        return value
    factor = 10.0**precision
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return _ROUNDERS[rounding](scaled) / factor


@dataclass(frozen=True, eq=False, repr=False)
class Duration:
    """An immutable, signed span of time stored in milliseconds.

    Example:
        >>> total = Duration.from_hours(2) + Duration.from_minutes(30)
        >>> total.minutes()
        150.0
        >>> Duration.parse("1h 30m 15s").format()
        '1h 30m 15s'
    """

    _milliseconds: float = field(default=0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_milliseconds", float(self._milliseconds))

    # --- Construction ---

    @classmethod
    def from_milliseconds(cls, milliseconds: Number) -> "Duration":
        return cls(milliseconds)

    @classmethod
    def from_seconds(cls, seconds: Number) -> "Duration":
        return cls(seconds * SECOND)

    @classmethod
    def from_minutes(cls, minutes: Number) -> "Duration":
        return cls(minutes * MINUTE)

    @classmethod
    def from_hours(cls, hours: Number) -> "Duration":
        return cls(hours * HOUR)

    @classmethod
    def from_days(cls, days: Number) -> "Duration":
        return cls(days * DAY)

    @classmethod
    def from_weeks(cls, weeks: Number) -> "Duration":
        return cls(weeks * WEEK)

    @classmethod
    def from_months(cls, months: Number) -> "Duration":
        """Create a duration from months (30-day approximation)."""
        return cls(months * MONTH)

    @classmethod
    def from_years(cls, years: Number) -> "Duration":
        """Create a duration from years (365-day approximation)."""
        return cls(years * YEAR)

    @classmethod
    def from_unit(cls, value: Number, unit: str) -> "Duration":
        """Create a duration from a value and a unit label ("ms", "h", "mo", ...)."""
        return cls(value * unit_to_milliseconds(unit))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls(delta / timedelta(milliseconds=1))

    @classmethod
    def parse(
        cls, text: str, *, strict: bool = True, allow_partial: bool = False
    ) -> "Duration":
        """Parse a duration string such as "1h 30m" or "2d 4h".

        Args:
            text: The string to parse
            strict: Reject repeated units ("1d 2d"); when False they are summed
            allow_partial: Ignore non-duration text ("1h foo") instead of failing

        Raises:
            EmptyInputError: If the text is blank
            NoTokensFoundError: If the text holds no duration tokens
            DuplicateUnitError: If strict and a unit appears twice
            UnexpectedTrailingInputError: If other text remains and not allow_partial

        Example:
            >>> Duration.parse("1h 30m").minutes()
            90.0
            >>> Duration.parse("1d 2d 3d", strict=False).days()
            6.0
        """
        return cls(
            parse_milliseconds(text, strict=strict, allow_partial=allow_partial)
        )

    # --- Conversion ---

    def milliseconds(self) -> float:
        """Return the raw stored value, unrounded."""
        return self._milliseconds

    def convert(
        self,
        ratio: Number,
        *,
        precision: int | None = None,
        rounding: RoundingMode = "round",
    ) -> float:
        """Return this duration expressed in a unit of `ratio` milliseconds.

        Without precision the result is returned at full float precision.
        With precision it is rounded to that many decimal places using
        "round" (half away from zero), "floor" or "ceil".

        Raises:
            DivisionByZeroError: If ratio is zero
        """
        if ratio == 0:
            raise DivisionByZeroError()
        return _apply_precision(self._milliseconds / ratio, precision, rounding)

    def to(
        self,
        unit: str,
        *,
        precision: int | None = None,
        rounding: RoundingMode = "round",
    ) -> float:
        """Convert to a unit named by label, e.g. duration.to("h", precision=1)."""
        return self.convert(
            unit_to_milliseconds(unit), precision=precision, rounding=rounding
        )

    def seconds(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        return self.convert(SECOND, precision=precision, rounding=rounding)

    def minutes(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        return self.convert(MINUTE, precision=precision, rounding=rounding)

    def hours(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        return self.convert(HOUR, precision=precision, rounding=rounding)

    def days(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        return self.convert(DAY, precision=precision, rounding=rounding)

    def weeks(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        return self.convert(WEEK, precision=precision, rounding=rounding)

    def months(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        """Return the duration in 30-day months."""
        return self.convert(MONTH, precision=precision, rounding=rounding)

    def years(
        self, *, precision: int | None = None, rounding: RoundingMode = "round"
    ) -> float:
        """Return the duration in 365-day years."""
        return self.convert(YEAR, precision=precision, rounding=rounding)

    def to_timedelta(self) -> timedelta:
        """Return an equivalent datetime.timedelta (microsecond resolution)."""
        return timedelta(milliseconds=self._milliseconds)

    # --- Arithmetic ---

    def add(self, other: "Duration") -> "Duration":
        return Duration(self._milliseconds + other._milliseconds)

    def sub(self, other: "Duration") -> "Duration":
        return Duration(self._milliseconds - other._milliseconds)

    def mul(self, factor: Number) -> "Duration":
        return Duration(self._milliseconds * factor)

    def div(self, divisor: Number) -> "Duration":
        """Return this duration divided by a number.

        Raises:
            DivisionByZeroError: If divisor is zero
        """
        if divisor == 0:
            raise DivisionByZeroError()
        return Duration(self._milliseconds / divisor)

    def abs(self) -> "Duration":
        return Duration(abs(self._milliseconds))

    def is_zero(self) -> bool:
        return self._milliseconds == 0

    # --- Comparison ---

    def eq(self, other: "Duration") -> bool:
        return self._milliseconds == other._milliseconds

    def lt(self, other: "Duration") -> bool:
        return self._milliseconds < other._milliseconds

    def gt(self, other: "Duration") -> bool:
        return self._milliseconds > other._milliseconds

    def lte(self, other: "Duration") -> bool:
        return self._milliseconds <= other._milliseconds

    def gte(self, other: "Duration") -> bool:
        return self._milliseconds >= other._milliseconds

    # --- Formatting ---

    def format(self) -> str:
        """Format as a compact string, e.g. "1h 5m" or "-2d 3h 0.5ms"."""
        return format_milliseconds(self._milliseconds)

    # --- Operator protocol ---

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: object) -> "Duration":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.mul(factor)

    def __rmul__(self, factor: object) -> "Duration":
        return self.__mul__(factor)

    def __truediv__(self, other: object) -> "Duration | float":
        if isinstance(other, Duration):
            if other._milliseconds == 0:
                raise DivisionByZeroError()
            return self._milliseconds / other._milliseconds
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Duration":
        return Duration(-self._milliseconds)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.eq(other)

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return not self.eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.gte(other)

    @override
    def __hash__(self) -> int:
        return hash(self._milliseconds)

    @override
    def __str__(self) -> str:
        return self.format()

    @override
    def __repr__(self) -> str:
        return f"Duration({self._milliseconds!r} ms)"
