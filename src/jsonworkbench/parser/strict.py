"""Strict JSON parsing and structural measurements."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, NoReturn


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Invalid constant '{name}': not allowed in strict JSON")


def _parse_int(literal: str) -> int | Decimal:
    try:
        return int(literal)
    except ValueError:
        # Past the interpreter's int/str digit limit.
        return Decimal(literal)


def _parse_float(literal: str) -> float | Decimal:
    number = float(literal)
    if math.isfinite(number):
        return number
    return Decimal(literal)


def parse_strict(text: str) -> Any:
    """Parse *text* as strict JSON.

    Same as ``json.loads`` except that ``NaN``, ``Infinity`` and ``-Infinity``
    are rejected.  Numbers that do not fit a ``float`` (``1e400``) or exceed
    the interpreter's integer digit limit come back as exact ``Decimal``
    values instead of ``inf`` or an error.  Raises ``json.JSONDecodeError``
    (a ``ValueError``) on syntax errors and ``RecursionError`` on
    pathologically deep input.
    """
    return json.loads(
        text,
        parse_constant=_reject_constant,
        parse_int=_parse_int,
        parse_float=_parse_float,
    )


def json_depth(value: Any) -> int:
    """Return the nesting depth of a parsed JSON value.

    Scalars add nothing, an empty array or object counts as one level, and
    the deepest nested container dominates.  The root starts at depth 0, so
    ``1`` → 0, ``{}`` → 1, ``{"a": [1]}`` → 2.

    Iterative, so documents nested deeper than the interpreter's recursion
    limit are still measured.
    """
    deepest = 0
    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        node, ambient = stack.pop()
        if isinstance(node, dict):
            children: list[Any] = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            deepest = max(deepest, ambient)
            continue
        if not children:
            deepest = max(deepest, ambient + 1)
            continue
        stack.extend((child, ambient + 1) for child in children)
    return deepest
