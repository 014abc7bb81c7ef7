"""Observability – run context binding and get_logger helper."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import structlog


@contextlib.contextmanager
def simulation_context(run_id: str, **values: Any) -> Iterator[None]:
    """Bind ``run_id`` (and *values*) to every log line emitted inside the block.

    Usage::

        with simulation_context("run-1", seed=42):
            simulation.run()
    """
    with structlog.contextvars.bound_contextvars(run_id=run_id, **values):
        yield


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "simulation_context"]
