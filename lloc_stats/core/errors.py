USAGE_MESSAGE = (
    "Expected arguments were not present. "
    "Usage: lloc-stats source.xml [dest.csv]"
)


class LlocStatsError(Exception):
    """Base exception for report processing."""


class ArgumentError(LlocStatsError):
    """Raised when a required command line argument is missing."""

    def __init__(self, message: str = USAGE_MESSAGE):
        super().__init__(message)


class ReportParseError(LlocStatsError):
    """Raised when the source report cannot be read or parsed."""


class ReportFormatError(LlocStatsError):
    """Raised when the report parses but does not have the expected shape."""


class EmptyCollectionError(LlocStatsError):
    """Raised when an aggregate needs at least one item and got none."""
