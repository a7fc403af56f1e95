"""Domain candidates – enums carrying an i18n message key."""
from __future__ import annotations

from enum import Enum
from typing import Mapping


class LocalizableEnum(Enum):
    """Enum whose value is the message key of its human-readable label."""

    @property
    def message_key(self) -> str:
        return self.value


class CandidateStatus(LocalizableEnum):
    ACTIVE = "candidateStatus.active"
    INACTIVE = "candidateStatus.inactive"
    BLOCKED = "candidateStatus.blocked"


class Gender(LocalizableEnum):
    MALE = "gender.male"
    FEMALE = "gender.female"
    OTHER = "gender.other"
    UNDECLARED = "gender.undeclared"


class EducationLevel(LocalizableEnum):
    PRIMARY = "educationLevel.primary"
    SECONDARY = "educationLevel.secondary"
    TECHNICAL = "educationLevel.technical"
    UNIVERSITY = "educationLevel.university"
    POSTGRADUATE = "educationLevel.postgraduate"
    DOCTORATE = "educationLevel.doctorate"


class DocumentType(LocalizableEnum):
    NATIONAL_ID = "documentType.national_id"
    FOREIGN_ID = "documentType.foreign_id"
    PASSPORT = "documentType.passport"
    DNI = "documentType.dni"
    DRIVING_LICENSE = "documentType.driving_license"
    OTHER = "documentType.other"


def label_for(member: LocalizableEnum | None, messages: Mapping[str, str] | None = None) -> str | None:
    """Resolve *member*'s label through *messages*, falling back to its name."""
    if member is None:
        return None
    return (messages or {}).get(member.message_key, member.name)


__all__ = [
    "CandidateStatus",
    "DocumentType",
    "EducationLevel",
    "Gender",
    "LocalizableEnum",
    "label_for",
]
