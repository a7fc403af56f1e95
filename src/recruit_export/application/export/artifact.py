"""Application export – ExportArtifact."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExportArtifact"]


@dataclass(frozen=True)
class ExportArtifact:
    """Finished export: the encoded bytes plus download metadata."""

    data: bytes
    filename: str
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'

    def __repr__(self) -> str:
        return (
            f"ExportArtifact(filename={self.filename!r}, "
            f"content_type={self.content_type!r}, size={self.size})"
        )
