"""HTTP API for the textcase engine."""
