"""Domain errors: rejected input."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from recruit_export.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"
    http_status = 400


@dataclass(frozen=True)
class FieldError:
    """One rejected request field."""

    field: str
    message: str


class ValidationError(DomainError):
    """Input failed validation; ``errors`` lists every rejected field."""

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: Sequence[FieldError] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: tuple[FieldError, ...] = tuple(errors)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["errors"] = [asdict(e) for e in self.errors]
        return body


__all__ = ["DomainError", "FieldError", "ValidationError"]
