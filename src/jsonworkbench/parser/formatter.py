"""Canonical re-serialization of strict JSON."""

from __future__ import annotations

from jsonworkbench.parser.encoder import dump_json
from jsonworkbench.parser.strict import parse_strict

INDENT = 2


def format_json(text: str) -> str | None:
    """Pretty-print *text* with 2-space indentation.

    Non-ASCII characters are written as-is unless the document holds
    unpaired surrogate escapes (``"\\ud800"``), which have no UTF-8 form; then
    the whole output is ASCII-escaped.  Returns ``None`` when the text is not
    strict JSON; callers decide how to tell the user.
    """
    try:
        value = parse_strict(text)
    except (ValueError, RecursionError):
        return None
    formatted = dump_json(value, indent=INDENT)
    try:
        formatted.encode("utf-8")
    except UnicodeEncodeError:
        formatted = dump_json(value, indent=INDENT, ensure_ascii=True)
    return formatted
