class DurationError(ValueError):
    """Base exception for durationkit."""


class EmptyInputError(DurationError):
    """Raised when a duration string is blank."""

    def __init__(self) -> None:
        super().__init__("Duration string cannot be empty")


class NoTokensFoundError(DurationError):
    """Raised when a duration string holds no value/unit tokens."""

    def __init__(self, text: str):
        super().__init__(
            f"Invalid duration string: no duration tokens found in {text!r}\n"
            f"Expected tokens like '1h', '30m', '1.5d' or '250ms'"
        )
        self.text = text


class DuplicateUnitError(DurationError):
    """Raised when strict parsing sees the same unit twice."""

    def __init__(self, unit: str):
        super().__init__(
            f"Duplicate time unit detected in strict mode: {unit}\n"
            f"Hint: pass strict=False to add repeated units together"
        )
        self.unit = unit


class UnexpectedTrailingInputError(DurationError):
    """Raised when text is left over after removing every duration token."""

    def __init__(self, remainder: str):
        super().__init__(
            f'Invalid duration string: unexpected token sequence "{remainder}"\n'
            f"Hint: pass allow_partial=True to ignore non-duration text"
        )
        self.remainder = remainder


class UnsupportedUnitError(DurationError):
    """Raised for a unit label outside ms, s, m, h, d, w, mo, y."""

    def __init__(self, unit: str):
        super().__init__(
            f"Unsupported duration unit: {unit!r}\n"
            f"Valid units: ms, s, m, h, d, w, mo, y"
        )
        self.unit = unit


class DivisionByZeroError(DurationError, ZeroDivisionError):
    """Raised when a duration is divided by zero."""

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")
