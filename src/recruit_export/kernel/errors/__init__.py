"""Kernel error hierarchy.

::

    BaseError
    ├── DomainError          400
    │   └── ValidationError
    ├── ApplicationError     400
    └── InfrastructureError  500
"""

from recruit_export.kernel.errors.application import ApplicationError
from recruit_export.kernel.errors.base import BaseError
from recruit_export.kernel.errors.domain import DomainError, FieldError, ValidationError
from recruit_export.kernel.errors.infrastructure import InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FieldError",
    "InfrastructureError",
    "ValidationError",
]
