"""Application export – PdfEncoder (reportlab)."""
from __future__ import annotations

import io
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from recruit_export.application.export.source import RowSource

__all__ = ["PdfEncoder"]


class PdfEncoder:
    """Renders rows as one table per page, ``rows_per_page`` rows each.

    Every table repeats the header row.  Pages are drawn and flushed one at a
    time on a :class:`reportlab.pdfgen.canvas.Canvas`, so only the current
    page's rows are held in memory.  An empty relation still yields one page
    holding the header row alone.
    """

    file_extension = "pdf"
    mime_type = "application/pdf"

    def __init__(
        self,
        *,
        rows_per_page: int = 40,
        pagesize: tuple[float, float] = landscape(A4),
        margin: float = 1 * cm,
        font_size: float = 7,
        title: str = "Exported data",
    ) -> None:
        if rows_per_page < 1:
            raise ValueError("rows_per_page must be >= 1")
        self._rows_per_page = rows_per_page
        self._pagesize = pagesize
        self._margin = margin
        self._font_size = font_size
        self._title = title

    def encode(self, source: RowSource[Any]) -> bytes:
        buf = io.BytesIO()
        pdf = canvas.Canvas(buf, pagesize=self._pagesize)
        pdf.setTitle(self._title)
        headers = source.headers()

        drawn = False
        for chunk in source.chunks(self._rows_per_page):
            body = [[cell.as_text() for cell in source.row_values(row)] for row in chunk]
            self._draw_table(pdf, headers, body)
            # showPage closes the page; save() adds none after the last one
            pdf.showPage()
            drawn = True

        if not drawn:
            self._draw_table(pdf, headers, [])
            pdf.showPage()

        pdf.save()
        return buf.getvalue()

    def _draw_table(self, pdf: canvas.Canvas, headers: list[str], body: list[list[str]]) -> None:
        page_width, page_height = self._pagesize
        avail_width = page_width - 2 * self._margin
        avail_height = page_height - 2 * self._margin

        data = [headers, *body]
        # fixed row heights keep a full chunk on exactly one page
        row_height = min(self._font_size * 1.7, avail_height / (self._rows_per_page + 1))
        col_width = avail_width / max(len(headers), 1)

        table = Table(
            data,
            colWidths=[col_width] * len(headers),
            rowHeights=[row_height] * len(data),
            repeatRows=1,
        )
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), self._font_size),
            ("LEADING", (0, 0), (-1, -1), self._font_size),
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("TOPPADDING", (0, 0), (-1, -1), 1),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
        ]))
        _, table_height = table.wrapOn(pdf, avail_width, avail_height)
        table.drawOn(pdf, self._margin, page_height - self._margin - table_height)
