class CsvRecordsError(Exception):
    """Base class for errors raised while turning text into records."""


class InvalidInputError(CsvRecordsError):
    """The input source does not look like delimiter-separated text."""


class MalformedInputError(CsvRecordsError):
    """The text cannot be turned into records."""
