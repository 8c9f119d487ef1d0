"""Comment and trailing-comma handling for JSON text.

Two families of helpers live here:

* ``has_comments`` / ``has_trailing_commas`` are free-text pattern checks used
  to enforce a strict policy.  They do not know about string literals, so a
  value such as ``"http://example.com"`` counts as a comment (good-enough
  heuristic, same as the editor it serves).
* ``strip_comments`` / ``strip_trailing_commas`` are string-literal aware and
  blank the offending characters with spaces instead of deleting them.
  Newlines are kept, so offsets, lines and columns reported by the strict
  parser afterwards still point into the original text.
"""

from __future__ import annotations

import re

_LINE_COMMENT_RE = re.compile(r"//.*")
_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_TRAILING_COMMA_RE = re.compile(r",\s*[}\]]")

_JSON_WHITESPACE = " \t\n\r"


def has_comments(text: str) -> bool:
    """Return True if the text contains a ``//`` or ``/* */`` comment pattern."""
    return bool(_LINE_COMMENT_RE.search(text) or _BLOCK_COMMENT_RE.search(text))


def has_trailing_commas(text: str) -> bool:
    """Return True if a comma is followed (across whitespace) by ``}`` or ``]``."""
    return _TRAILING_COMMA_RE.search(text) is not None


def _blank(chars: list[str], start: int, end: int) -> None:
    for i in range(start, end):
        if chars[i] not in "\r\n":
            chars[i] = " "


def _skip_string(text: str, i: int) -> int:
    """Return the index just past the string literal whose opening quote is at *i*.

    An unterminated literal runs to the end of the text.
    """
    i += 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    return len(text)


def strip_comments(text: str) -> str:
    """Blank out ``//`` and ``/* */`` comments outside string literals.

    An unterminated block comment is left in place so the strict parser
    reports it as a syntax error.
    """
    chars = list(text)
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            i = _skip_string(text, i)
            continue
        if text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                end = len(text)
            _blank(chars, i, end)
            i = end
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                break
            _blank(chars, i, end + 2)
            i = end + 2
            continue
        i += 1
    return "".join(chars)


def strip_trailing_commas(text: str) -> str:
    """Blank out commas directly followed (across whitespace) by ``}`` or ``]``.

    Run after ``strip_comments`` when both are wanted, so a comment between
    the comma and the closer does not hide it.
    """
    chars = list(text)
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            i = _skip_string(text, i)
            continue
        if ch == ",":
            j = i + 1
            while j < len(text) and text[j] in _JSON_WHITESPACE:
                j += 1
            if j < len(text) and text[j] in "}]":
                chars[i] = " "
        i += 1
    return "".join(chars)
