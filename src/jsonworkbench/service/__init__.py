"""Service layer: samples, persistence, and the editor workspace."""
