"""Pydantic models for report layout configuration.

These models validate and type the JSON file that fixes the physical
page, the palette, the font tiers and the page-flow metrics used by the
PDF renderer. All lengths are PDF points.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Page geometry
# ---------------------------------------------------------------------------


class PageSize(BaseModel):
    """Physical page (A4 by default)."""

    name: str = "A4"
    width: float = 595.28
    height: float = 841.89


class Margins(BaseModel):
    top: float = 50
    bottom: float = 50
    left: float = 50
    right: float = 50


# ---------------------------------------------------------------------------
# Palette & typography
# ---------------------------------------------------------------------------


class Palette(BaseModel):
    """Hex colours shared by header, section and table drawing."""

    primary: str = "#003366"
    secondary: str = "#FFB81C"
    text: str = "#333333"
    light_gray: str = "#CCCCCC"
    background: str = "#F5F5F5"
    danger: str = "#D32F2F"

    @field_validator("*")
    @classmethod
    def _hex_colour(cls, value: str) -> str:
        raw = value.lstrip("#")
        if len(raw) != 6:
            raise ValueError(f"Expected a #RRGGBB colour, got {value!r}")
        int(raw, 16)
        return "#" + raw.upper()

    def rgb(self, name: str) -> tuple[int, int, int]:
        """``"primary"`` → ``(0, 51, 102)``."""
        raw = getattr(self, name).lstrip("#")
        return int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16)


class FontSizes(BaseModel):
    """The five type-size tiers, in points."""

    title: float = 24
    heading: float = 14
    subheading: float = 12
    body: float = 10
    small: float = 8


class Typography(BaseModel):
    family: str = "Helvetica"
    sizes: FontSizes = Field(default_factory=FontSizes)
    line_height: float = Field(12, description="Advance per wrapped line of body text")


# ---------------------------------------------------------------------------
# Page flow
# ---------------------------------------------------------------------------


class SectionFlow(BaseModel):
    """Heights and bottom reserves for one section kind.

    ``*_reserve`` is the safety distance kept above the bottom margin:
    an entry that would reach ``page_height - bottom - reserve`` starts a
    new page instead.
    """

    title_reserve: float
    entry_height: float
    entry_reserve: float


class FlowMetrics(BaseModel):
    header_block_height: float = 100
    section_title_height: float = 25
    section_gap: float = 15
    value_offset: float = Field(150, description="Value column offset from the left margin")
    table_header_height: float = 20
    table_cell_padding: float = 5
    signature_placeholder_height: float = 35
    signature_placeholder_width: float = 150
    label_value: SectionFlow = Field(
        default_factory=lambda: SectionFlow(title_reserve=100, entry_height=20, entry_reserve=50)
    )
    table: SectionFlow = Field(
        default_factory=lambda: SectionFlow(title_reserve=150, entry_height=25, entry_reserve=30)
    )
    attachments: SectionFlow = Field(
        default_factory=lambda: SectionFlow(title_reserve=100, entry_height=20, entry_reserve=50)
    )
    signatures: SectionFlow = Field(
        default_factory=lambda: SectionFlow(title_reserve=200, entry_height=80, entry_reserve=20)
    )


# ---------------------------------------------------------------------------
# Finishing passes & branding
# ---------------------------------------------------------------------------


class Footer(BaseModel):
    """Stamps applied to every page once the page count is known.

    Offsets are measured downwards from the top of the bottom margin.
    """

    legend: str = "CONFIDENTIAL - Internal Incident Investigation Report"
    legend_offset: float = 20
    page_number_format: str = "Page {page} of {total}"
    page_number_offset: float = 35


class Branding(BaseModel):
    product_name: str = "OhOh! Incident Reporter"
    author: str = "OhOh! Safety Business Suite"
    subject: str = "Incident Investigation Report"
    keywords: str = "incident, investigation, health and safety, UK HSE"


# ---------------------------------------------------------------------------
# Root model
# ---------------------------------------------------------------------------


class ReportLayout(BaseModel):
    """Complete layout configuration for the PDF renderer."""

    page: PageSize = Field(default_factory=PageSize)
    margins: Margins = Field(default_factory=Margins)
    palette: Palette = Field(default_factory=Palette)
    typography: Typography = Field(default_factory=Typography)
    flow: FlowMetrics = Field(default_factory=FlowMetrics)
    footer: Footer = Field(default_factory=Footer)
    branding: Branding = Field(default_factory=Branding)

    @property
    def content_width(self) -> float:
        return self.page.width - self.margins.left - self.margins.right

    def break_line(self, reserve: float) -> float:
        """Lowest cursor position an entry may reach for a given reserve."""
        return self.page.height - self.margins.bottom - reserve
