"""Infrastructure errors: encoding and I/O failures."""

from __future__ import annotations

from recruit_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A failure outside the caller's control; answered with a 500."""

    default_code = "infrastructure_error"
    http_status = 500


__all__ = ["InfrastructureError"]
