"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from recruit_export.domain.candidates import CandidateRow
from recruit_export.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_defaults_cover_candidate_pii(self) -> None:
        assert {"email", "phone", "document_number"} <= DEFAULT_SENSITIVE_FIELDS

    def test_redact(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({"email": "a@b.c", "name": "Ana"}) == {"email": "***", "name": "Ana"}

    def test_keys_match_case_insensitively(self) -> None:
        assert SensitiveFieldsFilter(frozenset({"Token"})).redact({"TOKEN": "x"}) == {"TOKEN": "***"}

    def test_nested_containers(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"token"}))
        event = {"outer": {"token": "t", "keep": 1}, "items": [{"token": "u"}]}
        assert f.redact(event) == {"outer": {"token": "***", "keep": 1}, "items": [{"token": "***"}]}

    def test_dataclass_values(self) -> None:
        row = CandidateRow(1, "Ana", "ana@example.com", "600")
        redacted = SensitiveFieldsFilter().redact({"row": row})["row"]
        assert redacted["name"] == "Ana"
        assert redacted["email"] == "***"
        assert redacted["phone"] == "***"

    def test_circular_reference(self) -> None:
        loop: dict[str, object] = {}
        loop["self"] = loop
        assert SensitiveFieldsFilter().redact({"loop": loop}) == {"loop": {"self": "(circular)"}}

    def test_does_not_mutate_input(self) -> None:
        event = {"email": "a@b.c"}
        SensitiveFieldsFilter().redact(event)
        assert event == {"email": "a@b.c"}


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLogger:
    def test_emits_json(self, capsys, restore_logging) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("recruit_export.test").info("export.completed", export_id="abc", size=10)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "export.completed"
        assert payload["export_id"] == "abc"
        assert payload["size"] == 10
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_redacts_sensitive_fields(self, capsys, restore_logging) -> None:
        JsonLoggerFactory.configure(sensitive_fields=DEFAULT_SENSITIVE_FIELDS)
        get_logger("recruit_export.test").info("candidate", email="ana@example.com")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["email"] == "***"

    def test_level_filters(self, capsys, restore_logging) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        get_logger("recruit_export.test").info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_bound_values(self, capsys, restore_logging) -> None:
        JsonLoggerFactory.configure()
        get_logger("recruit_export.test", export_id="xyz").warning("export.limit_exceeded")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["export_id"] == "xyz"
