"""Kernel – errors and time, shared by every other package."""

from recruit_export.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    FieldError,
    InfrastructureError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FieldError",
    "InfrastructureError",
    "ValidationError",
]
