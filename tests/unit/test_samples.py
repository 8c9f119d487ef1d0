"""Tests for the built-in sample catalog against the default policy."""

from __future__ import annotations

import pytest

from jsonworkbench.models.errors import ErrorCode, InvalidResult, ValidResult
from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.validator import JsonValidator
from jsonworkbench.service.samples import SAMPLES, get_sample, list_samples


def _sample(name: str) -> str:
    return next(s.content for s in SAMPLES if s.name == name)


class TestCatalog:
    def test_five_samples(self) -> None:
        assert len(list_samples()) == 5

    def test_get_sample_in_range(self) -> None:
        sample = get_sample(0)
        assert sample is not None
        assert sample.name == "Valid JSON Sample"

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_get_sample_out_of_range(self, index: int) -> None:
        assert get_sample(index) is None

    def test_every_sample_described(self) -> None:
        for sample in SAMPLES:
            assert sample.name
            assert sample.description
            assert sample.content


class TestSamplesUnderPolicy:
    def test_valid_sample(self, validator: JsonValidator) -> None:
        result = validator.validate(_sample("Valid JSON Sample"))
        assert isinstance(result, ValidResult)
        assert result.value["address"]["city"] == "New York"

    def test_trailing_comma_sample(self, validator: JsonValidator) -> None:
        text = _sample("Invalid JSON - Trailing Comma")
        result = validator.validate(text)
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.code == ErrorCode.TRAILING_COMMAS_NOT_ALLOWED
        lenient = validator.validate(text, Policy(allow_trailing_commas=True))
        assert isinstance(lenient, ValidResult)
        assert lenient.value["skills"] == ["JavaScript", "TypeScript", "Angular"]

    def test_large_sample_exceeds_default_limit(self, validator: JsonValidator) -> None:
        text = _sample("Large JSON Sample")
        result = validator.validate(text)
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.code == ErrorCode.LIMIT_EXCEEDED
        roomy = validator.validate(text, Policy(max_characters=len(text)))
        assert isinstance(roomy, ValidResult)
        assert len(roomy.value["users"]) == 100
        assert len(roomy.value["users"][0]["posts"]) == 5

    def test_syntax_error_sample(self, validator: JsonValidator) -> None:
        result = validator.validate(_sample("Invalid JSON - Syntax Error"))
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.code == ErrorCode.SYNTAX_ERROR
        assert result.diagnostic.line == 2

    def test_deep_sample_depth(self, validator: JsonValidator) -> None:
        text = _sample("Deep Nesting Sample")
        assert validator.validate(text, Policy(max_depth=11)).valid is True
        result = validator.validate(text, Policy(max_depth=10))
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.message == "JSON depth (11) exceeds maximum depth of 10"
