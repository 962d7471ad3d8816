"""
Getting text lines out of files and uploads.

Everything here finishes reading (and closes what it opened) before any
parsing happens; the parser itself only ever sees a list of strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Union

from charset_normalizer import from_bytes

from .errors import InvalidInputError
from .parser import parse
from .rules import ACCEPTED_SUFFIXES, DEFAULT_SEPARATOR, TEXT_ENCODING

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def require_csv_name(filename: Optional[str]) -> None:
    if not filename or not filename.lower().endswith(ACCEPTED_SUFFIXES):
        raise InvalidInputError(
            f"{filename!r} is not a delimited text file (expected one of {', '.join(ACCEPTED_SUFFIXES)})"
        )


def decode_text(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode ``raw`` to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer, defaulting to UTF-8.
    - A leading UTF-8 BOM is dropped rather than kept as part of the first field name.
    - If the detected encoding fails, try UTF-8, then UTF-8 with replacement characters.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or TEXT_ENCODING
    if raw.startswith(UTF8_BOM) and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        decode_fallback = True
        try:
            text = raw.decode(TEXT_ENCODING)
            decode_used = TEXT_ENCODING
        except UnicodeDecodeError:
            text = raw.decode(TEXT_ENCODING, errors="replace")
            decode_used = TEXT_ENCODING

    logger.debug("decoded %d bytes as %s (detected=%s, fallback=%s)", len(raw), decode_used, detected, decode_fallback)

    return text, {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }


def split_lines(text: str) -> List[str]:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text == "":
        return []

    lines = text.split("\n")
    # Trailing newlines do not start more lines.
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def read_lines(handle: IO) -> List[str]:
    """Read ``handle`` to the end, close it, and return its lines."""
    with handle:
        data = handle.read()

    if isinstance(data, bytes):
        data, _ = decode_text(data)
    return split_lines(data)


def load_records(path: Union[str, Path], separator: str = DEFAULT_SEPARATOR) -> List[Dict[str, str]]:
    path = Path(path)
    require_csv_name(path.name)
    return parse(read_lines(path.open("rb")), separator)
