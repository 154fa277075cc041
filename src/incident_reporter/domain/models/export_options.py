"""Export profile: which rules and sections apply to one export."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExportOptions(BaseModel):
    """Flags controlling validation strictness and report content.

    A *summary* export skips the investigation rules and sections; a
    *full investigation* export requires root cause analysis and
    corrective actions.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    summary_only: bool = False
    include_photos: bool = False
    include_signatures: bool = False
    include_root_cause: bool = False
    include_corrective_actions: bool = False
    include_witness_statements: bool = True
    include_attachments: bool = False

    @classmethod
    def defaults(cls, summary_only: bool = False) -> ExportOptions:
        """Default profile for a summary or a full investigation report."""
        full = not summary_only
        return cls(
            summary_only=summary_only,
            include_photos=full,
            include_signatures=True,
            include_root_cause=full,
            include_corrective_actions=full,
            include_witness_statements=full,
            include_attachments=full,
        )
