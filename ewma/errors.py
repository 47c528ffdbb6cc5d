# errors.py


class EwmaError(Exception):
    """Base class for every error raised by the ewma filters."""


class InvalidParameter(EwmaError, ValueError):
    """A smoothing parameter is out of range at construction time."""


class InvalidInput(EwmaError, ValueError):
    """A sample cannot be fed to the filter (non-finite, wrong type or out of range)."""


class ArithmeticOverflow(EwmaError, OverflowError):
    """An intermediate integer result does not fit the filter's integer width."""
