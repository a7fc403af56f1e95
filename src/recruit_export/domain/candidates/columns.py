"""Domain candidates – export column catalogue."""
from __future__ import annotations

from typing import Mapping

from recruit_export.application.export import ColumnDef
from recruit_export.domain.candidates.enums import label_for
from recruit_export.domain.candidates.models import CandidateRow

CANDIDATE_HEADERS: tuple[str, ...] = (
    "ID", "Name", "Email", "Phone", "Status", "Registered At",
)


def candidate_columns(messages: Mapping[str, str] | None = None) -> list[ColumnDef[CandidateRow]]:
    """Columns of a candidate export; the status is rendered as its label."""
    return [
        ColumnDef("ID", lambda c: c.id),
        ColumnDef("Name", lambda c: c.name),
        ColumnDef("Email", lambda c: c.email),
        ColumnDef("Phone", lambda c: c.phone),
        ColumnDef("Status", lambda c: label_for(c.status, messages)),
        ColumnDef("Registered At", lambda c: c.registered_at),
    ]


__all__ = ["CANDIDATE_HEADERS", "candidate_columns"]
