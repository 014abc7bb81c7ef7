"""Root error class for the vendbus error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error vendbus raises on purpose.

    ``code`` is a stable slug for log filtering (``machine_not_found``,
    ``invalid_setting_value``); ``detail`` carries the identifiers that
    caused the failure so the CLI can log them as structured fields.
    """

    default_code: str = "vendbus_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten into log fields: ``error_code``, ``error`` and the detail keys."""
        return {"error_code": self.code, "error": self.message, **self.detail}


__all__ = ["BaseError"]
