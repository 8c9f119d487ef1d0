"""Structured diagnostics and validation results with source position tracking."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    COMMENTS_NOT_ALLOWED = "COMMENTS_NOT_ALLOWED"
    TRAILING_COMMAS_NOT_ALLOWED = "TRAILING_COMMAS_NOT_ALLOWED"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"


class Diagnostic(BaseModel):
    """A validation failure: message plus optional 1-based source location.

    Only syntax errors carry a location; policy and depth violations describe
    the whole document.
    """

    code: ErrorCode
    message: str = Field(min_length=1)
    line: int | None = Field(None, ge=1)
    column: int | None = Field(None, ge=1)

    @property
    def located(self) -> bool:
        return self.line is not None and self.column is not None

    def describe(self) -> str:
        """Render the message with a ``(Line L, Column C)`` suffix when located."""
        if self.located:
            return f"{self.message} (Line {self.line}, Column {self.column})"
        return self.message


class ValidResult(BaseModel):
    """Successful validation carrying the parsed document."""

    valid: Literal[True] = True
    value: Any = None


class InvalidResult(BaseModel):
    """Failed validation carrying the first violation found."""

    valid: Literal[False] = False
    diagnostic: Diagnostic


ValidationResult = ValidResult | InvalidResult
