from .errors import CsvRecordsError, InvalidInputError, MalformedInputError
from .parser import column, parse, width_issues

__all__ = [
    "CsvRecordsError",
    "InvalidInputError",
    "MalformedInputError",
    "column",
    "parse",
    "width_issues",
]
