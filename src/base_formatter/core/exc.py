"""
Core exception types for base_formatter.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "BaseFormatterError",
    "NumeralDomainError",
    "DigitNotFound",
    "DigitsUndefined",
    "MaximumBaseExceeded",
    "InvariantViolation",
]


class BaseFormatterError(Exception):
    """Common base for every error raised by base_formatter."""
    pass


class NumeralDomainError(BaseFormatterError):
    """Raised when inputs or configuration violate basic preconditions."""
    pass


class InvariantViolation(BaseFormatterError):
    """Raised when an internal engine invariant would be broken."""
    pass


class DigitNotFound(BaseFormatterError):
    """Raised when a digit value has no symbol, or a symbol has no digit value.

    Attributes
    ----------
    digit : int | str | None
        The offending digit value (encode) or character sequence (decode).
    """

    def __init__(self, message, *, digit=None):
        super().__init__(message)
        self.digit = digit


class DigitsUndefined(BaseFormatterError):
    """Raised when a string operation runs on a formatter built without digits."""
    pass


class MaximumBaseExceeded(BaseFormatterError):
    """Raised when a preset is asked for more digits than its pool holds.

    Attributes
    ----------
    base : int
        The requested base.
    maximum : int
        The largest base the preset can cover.
    """

    def __init__(self, base, maximum):
        super().__init__(f"Can't be higher than {maximum} digits (requested base={base})")
        self.base = base
        self.maximum = maximum
