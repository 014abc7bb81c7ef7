"""Observability – structured logging helpers."""
from vendbus.observability.logging.factory import LoggerFactory, configure_logging
from vendbus.observability.logging.processors import get_logger, simulation_context

__all__ = [
    "LoggerFactory",
    "configure_logging",
    "get_logger",
    "simulation_context",
]
