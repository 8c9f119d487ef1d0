"""Serialization of parsed JSON values, including exact ``Decimal`` numbers."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any


def _scalar(value: Any, ensure_ascii: bool) -> str:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Out of range number is not JSON compliant: {value}")
        return str(value)
    if isinstance(value, (str, int, float)) or value is None:
        return json.dumps(value, ensure_ascii=ensure_ascii, allow_nan=False)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_json(value: Any, *, indent: int | None = None, ensure_ascii: bool = False) -> str:
    """Serialize *value* the way ``json.dumps`` does, keeping ``Decimal`` numbers exact.

    With ``indent`` the layout matches ``json.dumps(value, indent=indent)``;
    without it the output is compact (``","`` and ``":"`` separators).
    Non-finite floats raise ``ValueError``.  Iterative, so any value the
    parser produced can be written back regardless of nesting.
    """
    key_sep = ": " if indent is not None else ":"

    def newline(level: int) -> str:
        return "\n" + " " * (indent * level) if indent is not None else ""

    out: list[str] = []
    # (item, level, is_literal_text)
    work: list[tuple[Any, int, bool]] = [(value, 0, False)]
    while work:
        item, level, literal = work.pop()
        if literal:
            out.append(item)
            continue
        if isinstance(item, dict):
            opener, closer = "{", "}"
            entries = [
                (_scalar(str(key), ensure_ascii) + key_sep, child) for key, child in item.items()
            ]
        elif isinstance(item, (list, tuple)):
            opener, closer = "[", "]"
            entries = [("", child) for child in item]
        else:
            out.append(_scalar(item, ensure_ascii))
            continue

        if not entries:
            out.append(opener + closer)
            continue
        out.append(opener)
        inner = newline(level + 1)
        pending: list[tuple[Any, int, bool]] = []
        for position, (prefix, child) in enumerate(entries):
            pending.append((("," if position else "") + inner + prefix, level + 1, True))
            pending.append((child, level + 1, False))
        pending.append((newline(level) + closer, level, True))
        work.extend(reversed(pending))
    return "".join(out)
