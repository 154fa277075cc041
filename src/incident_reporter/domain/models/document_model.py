"""Renderer-agnostic document model.

The mapper produces a ``DocumentModel``; the page-flow renderer consumes
it. Sections form a closed, discriminated union on ``kind`` so that the
renderer can dispatch exhaustively. Every value is already a display
string: the renderer only lays text out.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from incident_reporter.domain.models.enums import ReportKind


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class LabelValueRow(_Frozen):
    label: str
    value: str


class LabelValueSection(_Frozen):
    kind: Literal["label_value"] = "label_value"
    title: str
    rows: tuple[LabelValueRow, ...] = ()


class TableSection(_Frozen):
    kind: Literal["table"] = "table"
    title: str
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()


class AttachmentEntry(_Frozen):
    uri: str
    caption: Optional[str] = None


class AttachmentSection(_Frozen):
    kind: Literal["attachments"] = "attachments"
    title: str
    attachments: tuple[AttachmentEntry, ...] = ()


class SignatureEntry(_Frozen):
    name: str
    role: Optional[str] = None
    signed_at: str
    image_ref: Optional[str] = None


class SignatureSection(_Frozen):
    kind: Literal["signatures"] = "signatures"
    title: str
    signatures: tuple[SignatureEntry, ...] = ()


Section = Annotated[
    Union[LabelValueSection, TableSection, AttachmentSection, SignatureSection],
    Field(discriminator="kind"),
]


class DocumentModel(_Frozen):
    """Ordered sections plus the header block fields."""

    report_title: str
    report_kind: ReportKind
    reference_code: str
    category_label: str
    generated_at: str
    sections: tuple[Section, ...] = ()

    def section_titles(self) -> list[str]:
        return [s.title for s in self.sections]

    def find(self, title: str) -> Section | None:
        """Return the first section with *title*, or ``None``."""
        return next((s for s in self.sections if s.title == title), None)
