"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class LoggerFactory:
    """Configure structlog on top of the stdlib root logger."""

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        *,
        json: bool = True,
        cache: bool = True,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(
    level: int | str = logging.INFO, *, json: bool = True, cache: bool = True
) -> None:
    """Shorthand for :meth:`LoggerFactory.configure`."""
    LoggerFactory.configure(level, json=json, cache=cache)


__all__ = ["LoggerFactory", "configure_logging"]
