"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, TypeVar

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses declare typed fields with defaults and set ``_prefix``.
    ``_validate`` runs after every construction, including the copies made
    by :meth:`overridden`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def overridden(self: S, **changes: Any) -> S:
        """Copy with the non-``None`` *changes* applied, e.g. CLI flags."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **changes) if changes else self


__all__ = ["Settings"]
