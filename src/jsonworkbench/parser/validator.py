"""Policy-driven JSON validation: limits, leniency rules, syntax, depth."""

from __future__ import annotations

from jsonworkbench.models.errors import (
    Diagnostic,
    ErrorCode,
    InvalidResult,
    ValidationResult,
    ValidResult,
)
from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.diagnostics import diagnostic_from_error
from jsonworkbench.parser.lenient import (
    has_comments,
    has_trailing_commas,
    strip_comments,
    strip_trailing_commas,
)
from jsonworkbench.parser.strict import json_depth, parse_strict


class JsonValidator:
    """Checks a text buffer against a ``Policy`` and reports the first violation.

    Checks run in order and short-circuit: character limit, comments,
    trailing commas, strict parse, depth.  Failures are returned as
    ``InvalidResult``; nothing is raised.
    """

    def validate(self, text: str, policy: Policy | None = None) -> ValidationResult:
        if policy is None:
            policy = Policy()

        diagnostic = (
            self._check_length(text, policy)
            or self._check_comments(text, policy)
            or self._check_trailing_commas(text, policy)
        )
        if diagnostic is not None:
            return InvalidResult(diagnostic=diagnostic)

        try:
            value = parse_strict(self._prepare(text, policy))
        except (ValueError, RecursionError) as exc:
            return InvalidResult(diagnostic=diagnostic_from_error(exc, text))

        if policy.max_depth is not None:
            depth = json_depth(value)
            if depth > policy.max_depth:
                return InvalidResult(
                    diagnostic=Diagnostic(
                        code=ErrorCode.DEPTH_EXCEEDED,
                        message=(
                            f"JSON depth ({depth}) exceeds maximum depth of {policy.max_depth}"
                        ),
                    )
                )

        return ValidResult(value=value)

    @staticmethod
    def _check_length(text: str, policy: Policy) -> Diagnostic | None:
        if len(text) > policy.max_characters:
            return Diagnostic(
                code=ErrorCode.LIMIT_EXCEEDED,
                message=f"JSON exceeds maximum character limit of {policy.max_characters}",
            )
        return None

    @staticmethod
    def _check_comments(text: str, policy: Policy) -> Diagnostic | None:
        if not policy.allow_comments and has_comments(text):
            return Diagnostic(
                code=ErrorCode.COMMENTS_NOT_ALLOWED,
                message="Comments are not allowed in strict JSON mode",
            )
        return None

    @staticmethod
    def _check_trailing_commas(text: str, policy: Policy) -> Diagnostic | None:
        if policy.allow_trailing_commas:
            return None
        # A tolerated comment must not hide a comma before the closer.
        if policy.allow_comments:
            text = strip_comments(text)
        if has_trailing_commas(text):
            return Diagnostic(
                code=ErrorCode.TRAILING_COMMAS_NOT_ALLOWED,
                message="Trailing commas are not allowed in strict JSON mode",
            )
        return None

    @staticmethod
    def _prepare(text: str, policy: Policy) -> str:
        """Blank out constructs the policy tolerates so the strict parser accepts them."""
        if policy.allow_comments:
            text = strip_comments(text)
        if policy.allow_trailing_commas:
            text = strip_trailing_commas(text)
        return text


_validator = JsonValidator()


def validate(text: str, policy: Policy | None = None) -> ValidationResult:
    """Validate *text* under *policy* (defaults to a strict ``Policy()``)."""
    return _validator.validate(text, policy)
