"""Map raw parser failures to line/column-addressed diagnostics."""

from __future__ import annotations

import json
import re

from jsonworkbench.models.errors import Diagnostic, ErrorCode

# Engines report failure position differently: a zero-based character offset
# ("at position 12", Python's "(char 12)") or an already-resolved 1-based pair.
_OFFSET_RE = re.compile(r"at position (\d+)|\(char (\d+)\)")
_LINE_COLUMN_RE = re.compile(r"line (\d+) column (\d+)")

_UNKNOWN_ERROR = "Unknown JSON parsing error"


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a zero-based character offset into a 1-based ``(line, column)``."""
    fragments = text[:offset].split("\n")
    return len(fragments), len(fragments[-1]) + 1


def locate_message(message: str, text: str) -> tuple[int | None, int | None]:
    """Recover a location from a parser error message, offset first."""
    match = _OFFSET_RE.search(message)
    if match:
        offset = int(match.group(1) or match.group(2))
        return offset_to_location(text, offset)
    match = _LINE_COLUMN_RE.search(message)
    if match:
        return int(match.group(1)), int(match.group(2))
    return None, None


def diagnostic_from_error(exc: BaseException, text: str) -> Diagnostic:
    """Build a ``SYNTAX_ERROR`` diagnostic from a failed strict parse.

    ``json.JSONDecodeError`` carries the offset natively; anything else falls
    back to pattern-matching its message.  The reported message is the
    parser's own.
    """
    if isinstance(exc, RecursionError):
        return Diagnostic(
            code=ErrorCode.SYNTAX_ERROR,
            message="JSON is nested too deeply to parse",
        )
    message = str(exc) or _UNKNOWN_ERROR
    if isinstance(exc, json.JSONDecodeError):
        line, column = offset_to_location(text, exc.pos)
    else:
        line, column = locate_message(message, text)
    return Diagnostic(code=ErrorCode.SYNTAX_ERROR, message=message, line=line, column=column)
