"""Page flow: cursor-driven placement into buffered pages.

Layout never writes to the PDF directly. It appends draw operations to
in-memory ``Page`` objects so that finishing passes (legend, "Page i of
N") can revisit every page once the final page count is known. The
buffered pages are painted in one forward pass afterwards.

Break rule: an entry of height ``h`` drawn at cursor ``y`` with bottom
reserve ``r`` moves to a new page when ``y + h >= page_height -
bottom_margin - r``. The boundary is inclusive. Entries taller than a whole
page are placed line by line, so nothing is drawn past the break line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from incident_reporter.config.models import ReportLayout


@dataclass(frozen=True)
class TextOp:
    """One line of text in a cell whose top-left corner is ``(x, y)``."""

    x: float
    y: float
    width: float
    height: float
    text: str
    size: float
    style: str = ""
    colour: str = "text"
    align: str = "L"


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    colour: str = "light_gray"


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    colour: str = "light_gray"


DrawOp = Union[TextOp, LineOp, RectOp]


@dataclass
class Page:
    """A buffered page: its 1-based number and the operations drawn on it."""

    number: int
    ops: list[DrawOp] = field(default_factory=list)

    def texts(self) -> list[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


class PageFlow:
    """Vertical cursor plus the list of pages produced so far.

    One instance lays out exactly one document.
    """

    def __init__(self, layout: ReportLayout) -> None:
        self._layout = layout
        self.pages: list[Page] = []
        self.cursor: float = layout.margins.top

    @property
    def current(self) -> Page:
        if not self.pages:
            self.new_page()
        return self.pages[-1]

    def new_page(self) -> Page:
        """Start a page and move the cursor to the top margin."""
        page = Page(number=len(self.pages) + 1)
        self.pages.append(page)
        self.cursor = self._layout.margins.top
        return page

    def fits(self, height: float, reserve: float) -> bool:
        return self.cursor + height < self._layout.break_line(reserve)

    def fits_on_a_page(self, height: float, reserve: float) -> bool:
        """True if an entry of *height* fits on an otherwise empty page."""
        return self._layout.margins.top + height < self._layout.break_line(reserve)

    def ensure_room(self, height: float, reserve: float) -> bool:
        """Break to a new page unless an entry of *height* fits; True if it broke."""
        if self.fits(height, reserve):
            return False
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        self.cursor += height

    def draw(self, op: DrawOp) -> None:
        self.current.ops.append(op)
