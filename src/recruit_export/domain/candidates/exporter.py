"""Domain candidates – CandidateExporter facade."""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from recruit_export.application.export import (
    ExportHandle,
    ExportRequest,
    ExportService,
    ListRowSource,
    PagedRowSource,
)
from recruit_export.application.pagination import Page
from recruit_export.domain.candidates.columns import candidate_columns
from recruit_export.domain.candidates.models import CandidateRow


@runtime_checkable
class CandidateSource(Protocol):
    """Port: read access to the stored candidates, already mapped to rows."""

    def find_all(self) -> list[CandidateRow]: ...
    def find_page(self, page: int, size: int) -> Page[CandidateRow]: ...


class CandidateExporter:
    """Starts background candidate exports.

    A request for all rows loads every candidate into a list-backed source;
    a paged request streams the candidates through
    :meth:`CandidateSource.find_page` in the encoder's chunk size.  Either
    way the source is built on the worker thread, not the caller's.
    """

    def __init__(
        self,
        service: ExportService,
        candidates: CandidateSource,
        *,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self._service = service
        self._candidates = candidates
        self._columns = candidate_columns(messages)

    def export(self, request: ExportRequest) -> ExportHandle:
        if request.scope.is_all:
            return self._service.submit(
                request.format,
                lambda: ListRowSource(self._candidates.find_all(), self._columns),
            )
        return self._service.submit(
            request.format,
            lambda: PagedRowSource(self._candidates.find_page, self._columns),
        )


__all__ = ["CandidateExporter", "CandidateSource"]
