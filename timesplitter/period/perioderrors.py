"""Period splitter errors.

Each error carries a stable ``code`` (the string returned in result dicts)
and a human-readable ``message``.
"""

from typing import Optional


class PeriodSplitError(ValueError):
    """Base class for input errors raised by the period splitter."""

    code = "invalid input"

    def __init__(self, message: str = "", *, code: Optional[str] = None):
        if code is not None:
            self.code = code
        self.message = message or self.code
        super().__init__(self.message)


class ParseError(PeriodSplitError):
    """Time text is not a valid HH:mm wall-clock time."""

    code = "invalid time format"


class InvalidCountError(PeriodSplitError):
    """Period count is not an integer of at least the configured minimum."""

    code = "invalid count"


__all__ = [
    "PeriodSplitError",
    "ParseError",
    "InvalidCountError",
]
