"""FastMCP server exposing JSON validation, formatting and the saved document.

Run via::

    jsonworkbench-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http jsonworkbench-mcp    # streamable HTTP on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from jsonworkbench import __version__
from jsonworkbench.models.errors import InvalidResult
from jsonworkbench.models.policy import DEFAULT_MAX_CHARACTERS, Policy
from jsonworkbench.parser.formatter import format_json as _format
from jsonworkbench.parser.validator import validate
from jsonworkbench.service.document_store import DocumentStore, PersistenceError
from jsonworkbench.service.samples import get_sample as _get_sample
from jsonworkbench.service.samples import list_samples as _list_samples
from jsonworkbench.settings import Settings

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("jsonworkbench.mcp")

mcp = FastMCP("JSON Workbench")
_document_store: DocumentStore | None = None
_default_policy: Policy = Policy()


def _require_store() -> DocumentStore:
    if _document_store is None:
        raise ToolError("Document store not initialised")
    return _document_store


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def validate_json(
    text: str,
    max_characters: int = DEFAULT_MAX_CHARACTERS,
    max_depth: int | None = None,
    allow_comments: bool = False,
    allow_trailing_commas: bool = False,
) -> str:
    """Validate JSON text and report the first problem found.

    Args:
        text: The JSON document to check.
        max_characters: Reject documents longer than this.
        max_depth: Reject documents nested deeper than this (no limit when omitted).
        allow_comments: Accept ``//`` and ``/* */`` comments.
        allow_trailing_commas: Accept a comma before ``}`` or ``]``.
    """
    logger.info("validate_json called (text length=%d)", len(text))
    try:
        policy = Policy(
            max_characters=max_characters,
            max_depth=max_depth,
            allow_comments=allow_comments,
            allow_trailing_commas=allow_trailing_commas,
        )
    except ValueError as exc:
        raise ToolError(f"Invalid policy: {exc}") from exc

    result = validate(text, policy)
    if isinstance(result, InvalidResult):
        d = result.diagnostic
        return f"JSON is invalid.\n  [{d.code}] {d.describe()}"
    return "JSON is valid."


@mcp.tool
def format_json(text: str) -> str:
    """Pretty-print strict JSON with 2-space indentation.

    Args:
        text: The JSON document to format.
    """
    formatted = _format(text)
    if formatted is None:
        raise ToolError("Cannot format invalid JSON")
    return formatted


@mcp.tool
def list_samples() -> str:
    """List the built-in sample documents by index."""
    lines = ["Available samples:"]
    for i, sample in enumerate(_list_samples()):
        lines.append(f"  {i}: {sample.name}: {sample.description}")
    return "\n".join(lines)


@mcp.tool
def get_sample(index: int) -> str:
    """Return the content of a built-in sample document.

    Args:
        index: Position of the sample as shown by ``list_samples``.
    """
    sample = _get_sample(index)
    if sample is None:
        raise ToolError(f"Sample {index} not found")
    return sample.content


@mcp.tool
def save_document(content: str) -> str:
    """Save a JSON document.  Only valid, non-empty JSON is accepted.

    Args:
        content: The JSON document to persist.
    """
    store = _require_store()
    if not content:
        raise ToolError("Cannot save an empty document")
    result = validate(content, _default_policy)
    if isinstance(result, InvalidResult):
        raise ToolError(f"Cannot save invalid JSON: {result.diagnostic.describe()}")
    try:
        saved_at = store.save(content)
    except PersistenceError as exc:
        raise ToolError("Failed to save JSON") from exc
    return f"Document saved at {saved_at.isoformat()}"


@mcp.tool
def load_document() -> str:
    """Return the saved JSON document."""
    content = _require_store().load()
    if content is None:
        raise ToolError("No document has been saved")
    return content


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "JSON Workbench MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _document_store, _default_policy  # noqa: PLW0603
    _document_store = DocumentStore.from_settings(settings)
    _default_policy = settings.default_policy()

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
