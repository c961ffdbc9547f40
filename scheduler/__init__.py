"""JSON-file backed schedule manager."""
