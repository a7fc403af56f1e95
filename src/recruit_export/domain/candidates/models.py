"""Domain candidates – CandidateRow, the export representation of a candidate."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from recruit_export.domain.candidates.enums import (
    CandidateStatus,
    DocumentType,
    EducationLevel,
    Gender,
)


@dataclass(frozen=True)
class CandidateRow:
    id: int
    name: str
    email: str
    phone: str
    status: CandidateStatus = CandidateStatus.ACTIVE
    registered_at: date | None = None
    document_type: DocumentType | None = None
    document_number: str | None = None
    country: str | None = None
    city: str | None = None
    birth_date: date | None = None
    gender: Gender | None = None
    education_level: EducationLevel | None = None
    linkedin_url: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    modified_by: str | None = None
    modified_at: datetime | None = None


__all__ = ["CandidateRow"]
