"""JSON validation and formatting with line/column diagnostics."""

from jsonworkbench.parser.encoder import dump_json
from jsonworkbench.parser.formatter import format_json
from jsonworkbench.parser.strict import json_depth, parse_strict
from jsonworkbench.parser.validator import JsonValidator, validate

__all__ = [
    "JsonValidator",
    "dump_json",
    "format_json",
    "json_depth",
    "parse_strict",
    "validate",
]
