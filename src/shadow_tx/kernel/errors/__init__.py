"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError               (domain.py)
    │   └── ValidationError
    └── ApplicationError          (application.py)
        ├── ConfigurationError
        │   └── NoFactoryRegisteredError
        └── UnauthorizedError
"""

from shadow_tx.kernel.errors.application import (
    ApplicationError,
    ConfigurationError,
    NoFactoryRegisteredError,
    UnauthorizedError,
)
from shadow_tx.kernel.errors.base import BaseError
from shadow_tx.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DomainError",
    "NoFactoryRegisteredError",
    "UnauthorizedError",
    "ValidationError",
]
