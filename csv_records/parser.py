"""
Header-keyed record parsing.

The first line names the fields, every following line is one record.
Values are paired with field names by position and the pairing stops at
the shorter of the two, so short lines lose their trailing keys and long
lines lose their surplus values. Neither case is an error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .errors import MalformedInputError
from .rules import DEFAULT_SEPARATOR


def _split(line: str, separator: str) -> List[str]:
    # An empty line carries no fields at all.
    if line == "":
        return []
    return line.split(separator)


def _header(lines: Sequence[str], separator: str) -> List[str]:
    if not separator:
        raise ValueError("separator must be a non-empty string")

    header = _split(lines[0], separator)
    if not header:
        raise MalformedInputError("header line is empty; no field names to key records by")
    return header


def parse(lines: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> List[Dict[str, str]]:
    """
    Turn ``lines`` into one mapping per data line.

    - ``lines[0]`` is the header; ``lines[1:]`` are the data lines.
    - An empty ``lines`` gives an empty result.
    - An empty data line gives an empty record.
    - An empty header line raises ``MalformedInputError``.
    """
    if not lines:
        return []

    header = _header(lines, separator)
    return [dict(zip(header, _split(line, separator))) for line in lines[1:]]


def column(records: Sequence[Dict[str, str]], name: str) -> List[Optional[str]]:
    """Values of ``name`` across ``records``, ``None`` where a record lacks it."""
    return [record.get(name) for record in records]


def width_issues(lines: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> List[Dict[str, Any]]:
    """
    Report data lines whose field count differs from the header's.

    Row numbers are 1-based line numbers, so the first data line is row 2.
    """
    if not lines:
        return []

    expected = len(_header(lines, separator))
    issues: List[Dict[str, Any]] = []

    for i, line in enumerate(lines[1:], start=2):
        width = len(_split(line, separator))

        if width < expected:
            issues.append({
                "row": i,
                "column": None,
                "issue": "row_too_short",
                "value": str(width),
                "action": f"truncated_to_{width}",
            })
        elif width > expected:
            issues.append({
                "row": i,
                "column": None,
                "issue": "row_too_long",
                "value": str(width),
                "action": f"dropped_{width - expected}_values",
            })

    return issues
