"""Root error class for the recruit-export error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a machine-readable ``code`` and the HTTP status a
    transport layer should answer with, so callers can render a uniform
    error body without inspecting concrete types.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, must be JSON-serialisable.
        cause: Exception that triggered this one; also set as ``__cause__``.
    """

    default_code: str = "internal_error"
    http_status: int = 500

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Error body: code, HTTP status, message, detail and the cause if any."""
        body: dict[str, Any] = {
            "code": self.code,
            "status": self.http_status,
            "message": self.message,
        }
        if self.detail:
            body["detail"] = self.detail
        if self.cause is not None:
            body["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return body


__all__ = ["BaseError"]
