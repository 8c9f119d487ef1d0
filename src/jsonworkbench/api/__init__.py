"""REST API for JSON Workbench."""
