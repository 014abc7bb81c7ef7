"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   │   └── UnexpectedEventError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   │   └── MachineNotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)
        └── ConfigError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from vendbus.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from vendbus.kernel.errors.base import BaseError
from vendbus.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    MachineNotFoundError,
    NotFoundError,
    UnexpectedEventError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "ConflictError",
    "DomainError",
    "InvalidSettingValueError",
    "InvariantViolationError",
    "MachineNotFoundError",
    "MissingRequiredSettingError",
    "NotFoundError",
    "UnexpectedEventError",
    "ValidationError",
]
