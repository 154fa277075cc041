"""Tests for page-flow layout: breaking, header block, finishing passes.

Layout is inspected on the buffered pages, before anything is painted.
Round-number layouts are used where an entry must land exactly on the
break line.
"""

from __future__ import annotations

import pytest

from incident_reporter.adapters.page_flow import LineOp, PageFlow, RectOp, TextOp
from incident_reporter.adapters.pdf_adapter import ATTACHMENT_NOTICE, PdfAdapter
from incident_reporter.config.models import FlowMetrics, PageSize, ReportLayout
from incident_reporter.domain.models.document_model import (
    AttachmentEntry,
    AttachmentSection,
    DocumentModel,
    LabelValueRow,
    LabelValueSection,
    SignatureEntry,
    SignatureSection,
    TableSection,
)
from incident_reporter.domain.models.enums import ReportKind


def _make_model(*sections) -> DocumentModel:
    return DocumentModel(
        report_title="Full Incident Investigation Report",
        report_kind=ReportKind.INVESTIGATION,
        reference_code="INC-2024-001",
        category_label="Personal Injury",
        generated_at="01/06/2024 09:30",
        sections=sections,
    )


def _rows_section(count: int, title: str = "Details") -> LabelValueSection:
    return LabelValueSection(
        title=title,
        rows=tuple(LabelValueRow(label=f"Row {n}", value="value") for n in range(1, count + 1)),
    )


def _square_layout() -> ReportLayout:
    """600 x 800 page, 50pt margins; the first row starts at y=180.

    With 20pt rows and a 50pt reserve the break line is 700, so the 26th
    row (180 + 25 * 20 = 680, ending at 700) is exactly on the boundary.
    """
    return ReportLayout(
        page=PageSize(name="test", width=600, height=800),
        flow=FlowMetrics(header_block_height=105),
    )


def _label_op(page, label: str) -> TextOp:
    return next(op for op in page.ops if isinstance(op, TextOp) and op.text == label)


# ===================================================================
# PageFlow cursor
# ===================================================================


class TestPageFlow:
    def test_entry_ending_on_the_break_line_moves(self):
        flow = PageFlow(_square_layout())
        flow.new_page()
        flow.cursor = 680
        assert flow.ensure_room(20, 50) is True
        assert len(flow.pages) == 2
        assert flow.cursor == 50

    def test_entry_ending_just_above_the_break_line_stays(self):
        flow = PageFlow(_square_layout())
        flow.new_page()
        flow.cursor = 679.5
        assert flow.ensure_room(20, 50) is False
        assert len(flow.pages) == 1
        assert flow.cursor == 679.5

    def test_reserve_moves_the_break_line(self):
        flow = PageFlow(_square_layout())
        flow.new_page()
        flow.cursor = 535
        assert flow.fits(20, 100)
        assert not flow.fits(20, 200)

    def test_fits_on_a_page(self):
        flow = PageFlow(_square_layout())
        assert flow.fits_on_a_page(649, 50)
        assert not flow.fits_on_a_page(650, 50)

    def test_pages_are_numbered(self):
        flow = PageFlow(_square_layout())
        flow.new_page()
        flow.new_page()
        assert [p.number for p in flow.pages] == [1, 2]

    def test_draw_goes_to_the_current_page(self):
        flow = PageFlow(_square_layout())
        flow.draw(LineOp(0, 0, 10, 10))
        flow.new_page()
        flow.draw(RectOp(0, 0, 5, 5))
        assert isinstance(flow.pages[0].ops[0], LineOp)
        assert isinstance(flow.pages[1].ops[0], RectOp)


# ===================================================================
# Label/value sections
# ===================================================================


class TestLabelValueFlow:
    def test_rows_up_to_the_boundary_fit_on_one_page(self):
        adapter = PdfAdapter(_make_model(_rows_section(25)), _square_layout())
        assert adapter.page_count == 1

    def test_boundary_row_starts_a_new_page(self):
        adapter = PdfAdapter(_make_model(_rows_section(26)), _square_layout())
        pages = adapter.layout_pages()
        assert len(pages) == 2
        # New pages restart at the top margin, not below a header block.
        assert _label_op(pages[1], "Row 26:").y == 50
        assert _label_op(pages[0], "Row 25:").y == 660

    def test_default_a4_capacity(self):
        layout = ReportLayout()
        assert PdfAdapter(_make_model(_rows_section(28)), layout).page_count == 1
        assert PdfAdapter(_make_model(_rows_section(29)), layout).page_count == 2

    def test_label_and_value_columns(self):
        layout = ReportLayout()
        page = PdfAdapter(_make_model(_rows_section(1)), layout).layout_pages()[0]
        label = _label_op(page, "Row 1:")
        value = _label_op(page, "value")
        assert label.style == "B"
        assert label.x == layout.margins.left
        assert value.x == layout.margins.left + layout.flow.value_offset
        assert value.y == label.y

    def test_long_values_wrap_and_grow_the_row(self):
        layout = ReportLayout()
        section = LabelValueSection(
            title="Narrative",
            rows=(
                LabelValueRow(label="What Happened", value="slipped on wet floor " * 30),
                LabelValueRow(label="Next", value="short"),
            ),
        )
        page = PdfAdapter(_make_model(section), layout).layout_pages()[0]
        value_x = layout.margins.left + layout.flow.value_offset
        lines = [op for op in page.ops if isinstance(op, TextOp) and op.x == value_x]
        wrapped = lines[:-1]
        assert len(wrapped) > 1
        assert [b.y - a.y for a, b in zip(wrapped, wrapped[1:])] == [
            layout.typography.line_height
        ] * (len(wrapped) - 1)
        expected_height = layout.flow.label_value.entry_height + (len(wrapped) - 1) * 12
        assert _label_op(page, "Next:").y == _label_op(page, "What Happened:").y + expected_height

    def test_unbreakable_word_is_split(self):
        section = LabelValueSection(
            title="Evidence", rows=(LabelValueRow(label="Link", value="x" * 400),)
        )
        page = PdfAdapter(_make_model(section), ReportLayout()).layout_pages()[0]
        pieces = [op.text for op in page.ops if isinstance(op, TextOp) and set(op.text) == {"x"}]
        assert len(pieces) > 1
        assert "".join(pieces) == "x" * 400


# ===================================================================
# Rows taller than a page
# ===================================================================


_WORDS = [f"word{n}" for n in range(900)]


def _content_ops(pages, layout: ReportLayout) -> list[tuple[int, TextOp]]:
    """Every text op except the footer stamps, tagged with its page number."""
    stamps = {layout.footer.legend} | {f"Page {p.number} of {len(pages)}" for p in pages}
    return [
        (page.number, op)
        for page in pages
        for op in page.ops
        if isinstance(op, TextOp) and op.text not in stamps
    ]


def _tall_sections():
    text = " ".join(_WORDS)
    return [
        LabelValueSection(
            title="Incident Description", rows=(LabelValueRow(label="What Happened", value=text),)
        ),
        TableSection(title="Corrective Actions", headers=("Action", "Status"), rows=((text, "OPEN"),)),
        AttachmentSection(
            title="Attachments", attachments=(AttachmentEntry(uri="file:///a.jpg", caption=text),)
        ),
    ]


class TestTallRows:
    @pytest.mark.parametrize("section", _tall_sections(), ids=["label_value", "table", "attachments"])
    def test_nothing_is_drawn_past_the_bottom_margin(self, section):
        layout = ReportLayout()
        pages = PdfAdapter(_make_model(section), layout).layout_pages()
        assert len(pages) >= 2
        bottom = layout.page.height - layout.margins.bottom
        for _, op in _content_ops(pages, layout):
            assert op.y + op.height <= bottom

    @pytest.mark.parametrize("section", _tall_sections(), ids=["label_value", "table", "attachments"])
    def test_every_word_is_kept_in_order(self, section):
        layout = ReportLayout()
        pages = PdfAdapter(_make_model(section), layout).layout_pages()
        words = [
            w for _, op in _content_ops(pages, layout) for w in op.text.split() if "word" in w
        ]
        assert words == _WORDS

    def test_continuation_lines_restart_at_the_top_margin(self):
        layout = ReportLayout()
        section = _tall_sections()[0]
        pages = PdfAdapter(_make_model(section), layout).layout_pages()
        value_x = layout.margins.left + layout.flow.value_offset
        second = [op for n, op in _content_ops(pages, layout) if n == 2 and op.x == value_x]
        assert second[0].y == layout.margins.top
        assert [b.y - a.y for a, b in zip(second, second[1:])] == [
            layout.typography.line_height
        ] * (len(second) - 1)

    def test_short_rows_still_move_as_a_whole(self):
        # A wrapped row that fits on a page is not split when it reaches the bottom.
        layout = ReportLayout()
        wrapped = " ".join(["slipped"] * 120)
        section = LabelValueSection(
            title="Details",
            rows=tuple(LabelValueRow(label=f"Row {n}", value="value") for n in range(1, 28))
            + (LabelValueRow(label="Notes", value=wrapped),),
        )
        pages = PdfAdapter(_make_model(section), layout).layout_pages()
        value_x = layout.margins.left + layout.flow.value_offset
        notes = [
            (n, op) for n, op in _content_ops(pages, layout) if op.x == value_x and "slipped" in op.text
        ]
        assert len(notes) > 1
        assert {n for n, _ in notes} == {2}


# ===================================================================
# Header and finishing passes
# ===================================================================


class TestHeaderAndStamps:
    def test_header_block_only_on_first_page(self):
        layout = ReportLayout()
        pages = PdfAdapter(_make_model(_rows_section(70)), layout).layout_pages()
        assert len(pages) == 3
        assert layout.branding.product_name in pages[0].texts()
        assert "Full Incident Investigation Report" in pages[0].texts()
        assert "Reference: INC-2024-001 | Category: Personal Injury" in pages[0].texts()
        assert "Exported: 01/06/2024 09:30" in pages[0].texts()
        for page in pages[1:]:
            assert layout.branding.product_name not in page.texts()

    def test_every_page_is_stamped(self):
        layout = ReportLayout()
        pages = PdfAdapter(_make_model(_rows_section(70)), layout).layout_pages()
        for page in pages:
            assert layout.footer.legend in page.texts()
            assert f"Page {page.number} of 3" in page.texts()

    def test_stamps_sit_below_the_bottom_margin(self):
        layout = _square_layout()
        page = PdfAdapter(_make_model(), layout).layout_pages()[0]
        legend = _label_op(page, layout.footer.legend)
        number = _label_op(page, "Page 1 of 1")
        assert legend.y == 800 - 50 + 20
        assert number.y == 800 - 50 + 35
        assert legend.align == number.align == "C"

    def test_stamps_are_small_centred_text(self):
        layout = ReportLayout()
        pages = PdfAdapter(_make_model(_rows_section(70)), layout).layout_pages()
        small = layout.typography.sizes.small
        for page in pages:
            legend, number = page.ops[-2:]
            assert legend.text == "CONFIDENTIAL - Internal Incident Investigation Report"
            assert number.text == f"Page {page.number} of 3"
            for op in (legend, number):
                assert isinstance(op, TextOp)
                assert (op.x, op.width) == (layout.margins.left, layout.content_width)
                assert (op.size, op.height) == (small, pytest.approx(small * 1.2))
                assert (op.style, op.colour, op.align) == ("", "text", "C")

    def test_empty_model_is_one_page(self):
        assert PdfAdapter(_make_model(), ReportLayout()).page_count == 1

    def test_layout_runs_once(self):
        adapter = PdfAdapter(_make_model(_rows_section(3)), ReportLayout())
        first = adapter.layout_pages()
        assert adapter.layout_pages() is first
        assert len(first[0].texts()) == len(adapter.pages[0].texts())


# ===================================================================
# Other section kinds
# ===================================================================


class TestOtherSections:
    def test_table_columns_are_equal(self):
        layout = ReportLayout()
        table = TableSection(
            title="Corrective Actions",
            headers=("Action", "Responsible Person", "Due Date", "Status"),
            rows=(("Refit guard", "Maintenance Lead", "15/06/2024", "OPEN"),),
        )
        page = PdfAdapter(_make_model(table), layout).layout_pages()[0]
        col_w = layout.content_width / 4
        for index, header in enumerate(table.headers):
            op = _label_op(page, header)
            assert op.x == pytest.approx(layout.margins.left + index * col_w)
            assert op.width == pytest.approx(col_w - layout.flow.table_cell_padding)
        assert _label_op(page, "OPEN").y > _label_op(page, "Status").y

    def test_attachments_are_listed_not_embedded(self, caplog):
        section = AttachmentSection(
            title="Attachments",
            attachments=(
                AttachmentEntry(uri="file:///a.jpg", caption="Spill"),
                AttachmentEntry(uri="file:///b.jpg"),
            ),
        )
        with caplog.at_level("INFO", logger="incident_reporter.adapters.pdf_adapter"):
            page = PdfAdapter(_make_model(section), ReportLayout()).layout_pages()[0]
        texts = page.texts()
        assert ATTACHMENT_NOTICE in texts
        assert "1. Spill (file:///a.jpg)" in texts
        assert "2. Untitled attachment (file:///b.jpg)" in texts
        assert "not embedded" in caplog.text

    def test_signature_blocks_have_placeholders(self):
        layout = ReportLayout()
        section = SignatureSection(
            title="Signatures",
            signatures=(
                SignatureEntry(name="Sam Taylor", role="Supervisor", signed_at="20/05/2024"),
                SignatureEntry(
                    name="Chris Lee", role="Investigator", signed_at="22/05/2024", image_ref="sig.png"
                ),
            ),
        )
        page = PdfAdapter(_make_model(section), layout).layout_pages()[0]
        boxes = [op for op in page.ops if isinstance(op, RectOp)]
        assert len(boxes) == 2
        assert all((b.width, b.height) == (150, 35) for b in boxes)
        assert boxes[1].y - boxes[0].y == layout.flow.signatures.entry_height
        assert "Supervisor - Signed: 20/05/2024" in page.texts()

    def test_section_title_respects_its_reserve(self):
        # 27 rows leave the cursor low enough that the table title must move.
        table = TableSection(title="Corrective Actions", headers=("Action",), rows=(("x",),))
        pages = PdfAdapter(_make_model(_rows_section(27), table), ReportLayout()).layout_pages()
        assert len(pages) == 2
        assert "Corrective Actions" in pages[1].texts()
        assert _label_op(pages[1], "Corrective Actions").y == 50

    def test_text_outside_latin1_is_replaced(self):
        section = LabelValueSection(
            title="Notes",
            rows=(LabelValueRow(label="Comment", value="Guard \u2014 removed \U0001f6a7"),),
        )
        page = PdfAdapter(_make_model(section), ReportLayout()).layout_pages()[0]
        assert "Guard -- removed ?" in page.texts()
