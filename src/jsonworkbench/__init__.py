"""JSON Workbench: policy-driven JSON validation with line/column diagnostics."""

__version__ = "0.1.0"
