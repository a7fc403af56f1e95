"""Application errors: a use case refused or could not complete a request."""

from __future__ import annotations

from recruit_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"
    http_status = 400


__all__ = ["ApplicationError"]
