"""PDF adapter for incident reports using fpdf2.

Two phases:

1. **Layout** walks the ``DocumentModel`` and places every line, rule and
   placeholder onto buffered pages through ``PageFlow``. Two finishing
   passes then stamp the confidentiality legend and "Page i of N" on
   every page, which is only possible once the page count is final.
2. **Paint** replays the buffered pages into an ``FPDF`` instance and
   returns the serialized bytes.

An adapter instance produces exactly one document.
"""

from __future__ import annotations

import logging
from typing import assert_never

from fpdf import FPDF
from fpdf.errors import FPDFException

from incident_reporter.adapters.page_flow import LineOp, Page, PageFlow, RectOp, TextOp
from incident_reporter.config.models import ReportLayout
from incident_reporter.domain.errors import ReportGenerationError
from incident_reporter.domain.models.document_model import (
    AttachmentSection,
    DocumentModel,
    LabelValueSection,
    Section,
    SignatureSection,
    TableSection,
)

logger = logging.getLogger(__name__)

ATTACHMENT_NOTICE = "Images are not embedded in this report; attachments are listed by reference."

SIGNATURE_ON_FILE = "Signature image on file (not embedded)"


class IncidentReportPDF(FPDF):
    """FPDF configured from the layout: point units, fixed page, manual breaks."""

    def __init__(self, layout: ReportLayout) -> None:
        super().__init__(
            orientation="P", unit="pt", format=(layout.page.width, layout.page.height)
        )
        self.set_margins(layout.margins.left, layout.margins.top, layout.margins.right)
        # Page breaks are decided by PageFlow, never by fpdf2.
        self.set_auto_page_break(auto=False, margin=layout.margins.bottom)


class PdfAdapter:
    """Lay out and paint one ``DocumentModel`` as a PDF."""

    def __init__(self, document: DocumentModel, layout: ReportLayout) -> None:
        self.doc = document
        self.layout = layout
        self._pdf = IncidentReportPDF(layout)
        self._flow = PageFlow(layout)
        self._laid_out = False

        self._left = layout.margins.left
        self._width = layout.content_width
        self._sizes = layout.typography.sizes
        self._line_h = layout.typography.line_height

    # ------------------------------------------------------------------
    # Internal Helpers
    # ------------------------------------------------------------------

    def _sanitize(self, text: str) -> str:
        """Replace characters not supported by standard PDF fonts (Latin-1)."""
        if not text:
            return ""
        replacements = {
            "\u2013": "-",  # en-dash
            "\u2014": "--",  # em-dash
            "\u2018": "'",
            "\u2019": "'",
            "\u201c": '"',
            "\u201d": '"',
            "\u2026": "...",
            "\u2022": "-",  # bullet
        }
        for char, repl in replacements.items():
            text = text.replace(char, repl)
        return text.encode("latin-1", "replace").decode("latin-1")

    def _measure(self, text: str, size: float, style: str = "") -> float:
        self._pdf.set_font(self.layout.typography.family, style, size)
        return self._pdf.get_string_width(text)

    def _wrap(self, text: str, width: float, size: float, style: str = "") -> list[str]:
        """Greedy word wrap of *text* to *width*; always at least one line."""
        lines: list[str] = []
        for paragraph in self._sanitize(text).splitlines() or [""]:
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if self._measure(candidate, size, style) <= width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                # A single word wider than the column is split by characters.
                while self._measure(word, size, style) > width and len(word) > 1:
                    cut = len(word) - 1
                    while cut > 1 and self._measure(word[:cut], size, style) > width:
                        cut -= 1
                    lines.append(word[:cut])
                    word = word[cut:]
                current = word
            lines.append(current)
        return lines or [""]

    def _text(
        self,
        x: float,
        y: float,
        width: float,
        text: str,
        size: float,
        style: str = "",
        colour: str = "text",
        align: str = "L",
    ) -> TextOp:
        op = TextOp(
            x=x,
            y=y,
            width=width,
            height=size * 1.2,
            text=self._sanitize(text),
            size=size,
            style=style,
            colour=colour,
            align=align,
        )
        self._flow.draw(op)
        return op

    def _row_height(self, lines: int, entry_height: float) -> float:
        return entry_height + (max(lines, 1) - 1) * self._line_h

    def _place_row(
        self,
        cells: list[tuple[float, float, list[str]]],
        size: float,
        entry_height: float,
        reserve: float,
        label: str | None = None,
    ) -> None:
        """Place one row of wrapped ``(x, width, lines)`` cells at the cursor.

        A row that fits on a page is kept together. A taller row is placed
        line by line and continues on as many pages as it needs.
        """
        flow = self._flow
        depth = max((len(lines) for _, _, lines in cells), default=1)
        height = self._row_height(depth, entry_height)

        if flow.fits_on_a_page(height, reserve):
            flow.ensure_room(height, reserve)
            self._place_label(label)
            for x, width, lines in cells:
                for index, line in enumerate(lines):
                    self._text(x, flow.cursor + index * self._line_h, width, line, size)
            flow.advance(height)
            return

        logger.debug("Splitting a %d-line row across pages", depth)
        flow.ensure_room(entry_height, reserve)
        self._place_label(label)
        for index in range(depth):
            if index:
                flow.advance(self._line_h)
                flow.ensure_room(self._line_h, reserve)
            for x, width, lines in cells:
                if index < len(lines):
                    self._text(x, flow.cursor, width, lines[index], size)
        flow.advance(entry_height)

    def _place_label(self, label: str | None) -> None:
        if label is not None:
            self._text(
                self._left, self._flow.cursor, self.layout.flow.value_offset - 5,
                f"{label}:", self._sizes.body, "B",
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def pages(self) -> list[Page]:
        return self.layout_pages()

    @property
    def page_count(self) -> int:
        return len(self.layout_pages())

    def layout_pages(self) -> list[Page]:
        """Run layout and both finishing passes once; return the buffered pages."""
        if not self._laid_out:
            self._build_header()
            for section in self.doc.sections:
                self._build_section(section)
            self._stamp_legend()
            self._stamp_page_numbers()
            self._laid_out = True
            logger.debug(
                "Laid out %s on %d page(s)", self.doc.reference_code, len(self._flow.pages)
            )
        return self._flow.pages

    def generate(self) -> bytes:
        """Lay out, paint and serialize the document.

        Raises:
            ReportGenerationError: fpdf2 rejected a font, style or value.
        """
        try:
            pages = self.layout_pages()
            self._set_metadata()
            for page in pages:
                self._paint_page(page)
            return bytes(self._pdf.output())
        except (FPDFException, ValueError) as exc:
            raise ReportGenerationError(
                f"Could not paint report {self.doc.reference_code}: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_header(self) -> None:
        """Brand, report title, reference and export date on the first page."""
        flow = self._flow
        flow.new_page()
        top = flow.cursor
        self._text(
            self._left, top, self._width, self.layout.branding.product_name,
            self._sizes.title, "B", "primary",
        )
        self._text(
            self._left, top + 30, self._width, self.doc.report_title,
            self._sizes.heading, "B", "text",
        )
        self._text(
            self._left, top + 50, self._width,
            f"Reference: {self.doc.reference_code} | Category: {self.doc.category_label}",
            self._sizes.body,
        )
        self._text(
            self._left, top + 65, self._width, f"Exported: {self.doc.generated_at}",
            self._sizes.small,
        )
        flow.draw(LineOp(self._left, top + 85, self._left + self._width, top + 85, "primary"))
        flow.advance(self.layout.flow.header_block_height)

    def _build_section(self, section: Section) -> None:
        if isinstance(section, LabelValueSection):
            self._build_label_value(section)
        elif isinstance(section, TableSection):
            self._build_table(section)
        elif isinstance(section, AttachmentSection):
            self._build_attachments(section)
        elif isinstance(section, SignatureSection):
            self._build_signatures(section)
        else:
            assert_never(section)

    def _build_title(self, title: str, reserve: float) -> None:
        flow = self._flow
        height = self.layout.flow.section_title_height
        flow.ensure_room(height, reserve)
        self._text(self._left, flow.cursor, self._width, title, self._sizes.heading, "B", "primary")
        flow.advance(height)

    def _build_label_value(self, section: LabelValueSection) -> None:
        metrics = self.layout.flow
        sizing = metrics.label_value
        value_x = self._left + metrics.value_offset
        value_w = self._width - metrics.value_offset

        self._build_title(section.title, sizing.title_reserve)
        for row in section.rows:
            lines = self._wrap(row.value, value_w, self._sizes.body)
            self._place_row(
                [(value_x, value_w, lines)],
                self._sizes.body,
                sizing.entry_height,
                sizing.entry_reserve,
                label=row.label,
            )
        self._flow.advance(metrics.section_gap)

    def _build_table(self, section: TableSection) -> None:
        metrics = self.layout.flow
        sizing = metrics.table
        flow = self._flow
        col_w = self._width / max(len(section.headers), 1)
        cell_w = col_w - metrics.table_cell_padding

        self._build_title(section.title, sizing.title_reserve)

        flow.ensure_room(metrics.table_header_height, sizing.entry_reserve)
        for index, header in enumerate(section.headers):
            self._text(
                self._left + index * col_w, flow.cursor, cell_w, header,
                self._sizes.body, "B", "primary",
            )
        bottom = flow.cursor + metrics.table_header_height - 4
        flow.draw(LineOp(self._left, bottom, self._left + self._width, bottom))
        flow.advance(metrics.table_header_height)

        for row in section.rows:
            cells = [
                (self._left + index * col_w, cell_w, self._wrap(cell, cell_w, self._sizes.small))
                for index, cell in enumerate(row)
            ]
            self._place_row(cells, self._sizes.small, sizing.entry_height, sizing.entry_reserve)
        flow.advance(metrics.section_gap)

    def _build_attachments(self, section: AttachmentSection) -> None:
        metrics = self.layout.flow
        sizing = metrics.attachments
        flow = self._flow

        self._build_title(section.title, sizing.title_reserve)
        logger.info(
            "Listing %d attachment(s) for %s; images are not embedded",
            len(section.attachments),
            self.doc.reference_code,
        )

        flow.ensure_room(sizing.entry_height, sizing.entry_reserve)
        self._text(self._left, flow.cursor, self._width, ATTACHMENT_NOTICE, self._sizes.small, "", "danger")
        flow.advance(sizing.entry_height)

        for number, attachment in enumerate(section.attachments, start=1):
            caption = attachment.caption or "Untitled attachment"
            lines = self._wrap(f"{number}. {caption} ({attachment.uri})", self._width, self._sizes.body)
            self._place_row(
                [(self._left, self._width, lines)],
                self._sizes.body,
                sizing.entry_height,
                sizing.entry_reserve,
            )
        flow.advance(metrics.section_gap)

    def _build_signatures(self, section: SignatureSection) -> None:
        metrics = self.layout.flow
        sizing = metrics.signatures
        flow = self._flow

        self._build_title(section.title, sizing.title_reserve)
        for entry in section.signatures:
            flow.ensure_room(sizing.entry_height, sizing.entry_reserve)
            y = flow.cursor
            self._text(self._left, y, self._width, entry.name, self._sizes.subheading, "B")
            self._text(
                self._left, y + 15, self._width,
                f"{entry.role or 'N/A'} - Signed: {entry.signed_at}", self._sizes.small,
            )
            box_y = y + 30
            flow.draw(
                RectOp(
                    self._left, box_y,
                    metrics.signature_placeholder_width, metrics.signature_placeholder_height,
                )
            )
            if entry.image_ref:
                logger.debug("Signature image for %s not embedded: %s", entry.name, entry.image_ref)
                self._text(
                    self._left + 5, box_y + 5, metrics.signature_placeholder_width - 10,
                    SIGNATURE_ON_FILE, self._sizes.small, "", "light_gray",
                )
            flow.advance(sizing.entry_height)
        flow.advance(metrics.section_gap)

    # ------------------------------------------------------------------
    # Finishing passes
    # ------------------------------------------------------------------

    def _footer_y(self, offset: float) -> float:
        return self.layout.page.height - self.layout.margins.bottom + offset

    def _stamp(self, page: Page, y: float, text: str) -> None:
        size = self._sizes.small
        page.ops.append(
            TextOp(
                x=self._left,
                y=y,
                width=self._width,
                height=size * 1.2,
                text=self._sanitize(text),
                size=size,
                align="C",
            )
        )

    def _stamp_legend(self) -> None:
        footer = self.layout.footer
        y = self._footer_y(footer.legend_offset)
        for page in self._flow.pages:
            self._stamp(page, y, footer.legend)

    def _stamp_page_numbers(self) -> None:
        footer = self.layout.footer
        y = self._footer_y(footer.page_number_offset)
        total = len(self._flow.pages)
        for page in self._flow.pages:
            self._stamp(page, y, footer.page_number_format.format(page=page.number, total=total))

    # ------------------------------------------------------------------
    # Paint
    # ------------------------------------------------------------------

    def _set_metadata(self) -> None:
        branding = self.layout.branding
        self._pdf.set_title(self._sanitize(f"{self.doc.report_title} - {self.doc.reference_code}"))
        self._pdf.set_author(self._sanitize(branding.author))
        self._pdf.set_subject(self._sanitize(branding.subject))
        self._pdf.set_keywords(self._sanitize(branding.keywords))
        self._pdf.set_creator(self._sanitize(branding.product_name))

    def _paint_page(self, page: Page) -> None:
        pdf = self._pdf
        palette = self.layout.palette
        pdf.add_page()
        for op in page.ops:
            if isinstance(op, TextOp):
                pdf.set_font(self.layout.typography.family, op.style, op.size)
                pdf.set_text_color(*palette.rgb(op.colour))
                pdf.set_xy(op.x, op.y)
                pdf.cell(op.width, op.height, op.text, align=op.align)
            elif isinstance(op, LineOp):
                pdf.set_draw_color(*palette.rgb(op.colour))
                pdf.line(op.x1, op.y1, op.x2, op.y2)
            elif isinstance(op, RectOp):
                pdf.set_draw_color(*palette.rgb(op.colour))
                pdf.rect(op.x, op.y, op.width, op.height)
