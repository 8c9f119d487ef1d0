"""Pydantic domain models for JSON Workbench."""

from jsonworkbench.models.errors import (
    Diagnostic,
    ErrorCode,
    InvalidResult,
    ValidationResult,
    ValidResult,
)
from jsonworkbench.models.policy import DEFAULT_MAX_CHARACTERS, Policy

__all__ = [
    "DEFAULT_MAX_CHARACTERS",
    "Diagnostic",
    "ErrorCode",
    "InvalidResult",
    "Policy",
    "ValidResult",
    "ValidationResult",
]
