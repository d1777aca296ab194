"""
Exceptions and warnings raised by the report normalizer.
"""


class A11yReportError(Exception):
    """Base class for report normalizer errors."""


class InvalidPayloadError(A11yReportError):
    """Neither tool result in the scan payload could be read."""


class PartialDataWarning(UserWarning):
    """Only one of the two tool results was present in the scan payload."""
