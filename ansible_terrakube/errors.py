"""
Error taxonomy.

Only problems that must stop the current operation are exceptions. Problems
found while converting output values are recorded as diagnostics instead, so
that a partially converted tree can still be returned.
"""


class TerrakubeError(Exception):
    """Base class for all ansible_terrakube exceptions."""


class UnsupportedValue(TerrakubeError):
    """Raised when inference meets a value that is not a JSON kind."""

    def __init__(self, value):
        self.kind = type(value).__name__
        super().__init__(f"Unsupported value of type '{self.kind}': {value!r}")


class PayloadDecodeError(TerrakubeError):
    """Raised when an API response is not a well-formed JSON:API document."""
