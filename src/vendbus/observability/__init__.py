"""Observability – structured logging for the bus and simulation."""
