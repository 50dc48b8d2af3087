"""
Exception and warning types raised by the SAX-VSM engine.
"""


class SAXVSMError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(SAXVSMError, ValueError):
    """Raised when discretization parameters are inconsistent."""


class EmptySeriesError(SAXVSMError, ValueError):
    """Raised when a series is shorter than the sliding window."""

    def __init__(self, length: int, window_size: int):
        self.length = length
        self.window_size = window_size
        super().__init__(
            f"Series of length {length} is shorter than window size {window_size}"
        )


class EmptyInputError(SAXVSMError, ValueError):
    """Raised when there is nothing to classify or nothing to classify against."""


class DegenerateClassWarning(UserWarning):
    """Issued when a class has no training series and yields an empty word bag."""
