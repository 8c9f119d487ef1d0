"""JSON response class for payloads that carry parsed user documents."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from jsonworkbench.parser.encoder import dump_json


class WorkbenchJSONResponse(JSONResponse):
    """ASCII-escaped JSON that keeps ``Decimal`` numbers exact.

    Parsed documents may contain unpaired surrogates (``"\\ud800"``), which
    cannot be encoded as UTF-8, and numbers too large for ``float``.
    """

    def render(self, content: Any) -> bytes:
        return dump_json(content, ensure_ascii=True).encode("ascii")
