"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonworkbench.models.policy import DEFAULT_MAX_CHARACTERS, Policy


class Settings(BaseSettings):
    """Configuration for the JSON Workbench API and MCP servers.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
    max_body_bytes: int = 1 * 1024 * 1024

    # MCP
    mcp_transport: Literal["stdio", "http", "sse"] = "stdio"
    mcp_server_host: str = "localhost"
    mcp_server_port: int = 9000

    # Validation policy applied when a caller does not send one
    default_max_characters: int = DEFAULT_MAX_CHARACTERS
    default_max_depth: int | None = None
    default_allow_comments: bool = False
    default_allow_trailing_commas: bool = False

    # Persistence: JSON file holding the saved document; in-memory when unset
    document_path: Path | None = None

    def default_policy(self) -> Policy:
        """Build the ``Policy`` described by the ``default_*`` settings."""
        return Policy(
            max_characters=self.default_max_characters,
            max_depth=self.default_max_depth,
            allow_comments=self.default_allow_comments,
            allow_trailing_commas=self.default_allow_trailing_commas,
        )
