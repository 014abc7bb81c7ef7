"""Domain errors – inventory rule and wiring invariant violations."""

from __future__ import annotations

from typing import Any

from vendbus.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A wiring or state invariant was violated."""

    default_code = "invariant_violation"


class UnexpectedEventError(InvariantViolationError):
    """A handler received an event variant it was not registered for."""

    default_code = "unexpected_event"

    def __init__(self, handler: str, expected: str, received: str, **kwargs: Any) -> None:
        super().__init__(
            f"{handler} handles {expected}, got {received}",
            detail={"handler": handler, "expected": expected, "received": received},
            **kwargs,
        )
        self.handler = handler
        self.expected = expected
        self.received = received


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class MachineNotFoundError(NotFoundError):
    """No machine with the given identity was ever registered.

    Events only ever reference pre-registered machines, so this signals a
    wiring bug and is never recovered from.
    """

    default_code = "machine_not_found"

    def __init__(self, machine_id: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"machine_id": machine_id})
        super().__init__("Machine", machine_id, **kwargs)
        self.machine_id = machine_id


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "MachineNotFoundError",
    "NotFoundError",
    "UnexpectedEventError",
    "ValidationError",
]
