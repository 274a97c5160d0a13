"""Input-format exceptions raised by the puzzle parsers."""


class InputFormatError(ValueError):
    """Base exception for puzzle input that cannot be parsed."""


class MalformedCommandError(InputFormatError):
    """Raised when a dial rotation has an unknown direction or bad magnitude."""


class MalformedRangeError(InputFormatError):
    """Raised when an ID range is not ``start-end`` with ``start <= end``."""
