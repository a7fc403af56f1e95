"""Domain candidates – candidate rows, enums and the candidate export facade."""
from recruit_export.domain.candidates.columns import CANDIDATE_HEADERS, candidate_columns
from recruit_export.domain.candidates.enums import (
    CandidateStatus,
    DocumentType,
    EducationLevel,
    Gender,
    LocalizableEnum,
    label_for,
)
from recruit_export.domain.candidates.exporter import CandidateExporter, CandidateSource
from recruit_export.domain.candidates.models import CandidateRow

__all__ = [
    "CANDIDATE_HEADERS",
    "CandidateExporter",
    "CandidateRow",
    "CandidateSource",
    "CandidateStatus",
    "DocumentType",
    "EducationLevel",
    "Gender",
    "LocalizableEnum",
    "candidate_columns",
    "label_for",
]
