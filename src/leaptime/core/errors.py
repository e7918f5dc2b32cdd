class LeaptimeError(Exception):
    """Base error."""

class ConfigurationError(LeaptimeError):
    """Raised when time scale data is missing or malformed (e.g. an empty UTC-TAI table)."""

class OutOfRangeError(LeaptimeError, ValueError):
    """Raised when calendar or clock components do not describe an existing instant."""

class ParseError(LeaptimeError, ValueError):
    """Raised when a date/time string cannot be read."""

class UnsupportedFieldError(LeaptimeError):
    """Raised when a temporal accessor is queried for a field it does not support."""

class ScaleMismatchError(LeaptimeError, ValueError):
    """Raised when a UTC field is evaluated against an accessor built from another UTC scale."""

class UnsupportedOperationError(LeaptimeError, NotImplementedError):
    """Raised for operations a read-only view does not provide."""
