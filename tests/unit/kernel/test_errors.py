"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from recruit_export.application.export import (
    ExportFormat,
    ExportLimitExceededError,
    ExportProcessingError,
    UnsupportedExportFormatError,
)
from recruit_export.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    FieldError,
    InfrastructureError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("m")
        assert err.code == "internal_error"
        assert err.http_status == 500

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_omits_empty_detail(self) -> None:
        assert BaseError("m").to_dict() == {"code": "internal_error", "status": 500, "message": "m"}

    def test_to_dict_with_detail_and_cause(self) -> None:
        err = BaseError("wrapper", detail={"k": 1}, cause=ValueError("original"))
        body = err.to_dict()
        assert body["detail"] == {"k": 1}
        assert body["cause"] == "ValueError: original"

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops")))
        assert parsed["code"] == "oops"

    def test_repr(self) -> None:
        assert repr(BaseError("hello", code="hi")) == "BaseError('hi', 'hello')"


# ---------------------------------------------------------------------------
# Layers
# ---------------------------------------------------------------------------


class TestLayers:
    @pytest.mark.parametrize(
        ("cls", "code", "status"),
        [
            (DomainError, "domain_error", 400),
            (ValidationError, "validation_error", 400),
            (ApplicationError, "application_error", 400),
            (InfrastructureError, "infrastructure_error", 500),
        ],
    )
    def test_codes_and_status(self, cls: type[BaseError], code: str, status: int) -> None:
        err = cls("m")
        assert (err.code, err.http_status) == (code, status)

    def test_validation_error_fields(self) -> None:
        err = ValidationError("bad", errors=[FieldError("size", "too small")])
        assert err.fields == ["size"]
        assert err.to_dict()["errors"] == [{"field": "size", "message": "too small"}]


# ---------------------------------------------------------------------------
# Export errors
# ---------------------------------------------------------------------------


class TestExportErrors:
    def test_limit_exceeded(self) -> None:
        err = ExportLimitExceededError(ExportFormat.CSV, 10, 11)
        assert err.code == "export_limit_exceeded"
        assert err.http_status == 400
        assert err.to_dict()["detail"] == {"format": "csv", "max_allowed": 10, "requested": 11}

    def test_unsupported_format_names_the_field(self) -> None:
        err = UnsupportedExportFormatError("xml")
        assert isinstance(err, ValueError)
        assert err.fields == ["format"]
        assert "'xml'" in err.message

    def test_processing_error(self) -> None:
        cause = OSError("disk full")
        err = ExportProcessingError(ExportFormat.PDF, "failed", cause=cause)
        assert err.http_status == 500
        assert err.format is ExportFormat.PDF
        assert err.detail == {"format": "pdf"}
        assert err.__cause__ is cause
