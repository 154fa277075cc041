"""Validation findings and results.

Findings are plain values: the validator never raises, it only collects
``ValidationFinding`` objects into blocking errors and advisory warnings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class ValidationFinding:
    """A single validation finding.

    ``field`` is a reproducible path into the record: dotted for object
    traversal, bracketed for list items (``correctiveActions[2].description``).
    """

    field: str
    message: str
    section: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call.

    Attributes:
        errors: Blocking findings: the record is unfit for the export.
        warnings: Advisory findings: never affect ``valid``.
    """

    errors: tuple[ValidationFinding, ...] = ()
    warnings: tuple[ValidationFinding, ...] = ()

    @property
    def valid(self) -> bool:
        """True if there are no blocking errors."""
        return not self.errors

    def errors_for(self, field_path: str) -> list[ValidationFinding]:
        return [e for e in self.errors if e.field == field_path]

    def to_dict(self) -> dict:
        """Wire shape: ``{valid, errors: [...], warnings: [...]}``."""
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass
class FindingCollector:
    """Mutable accumulator used while rules run; frozen into a result at the end."""

    errors: list[ValidationFinding] = field(default_factory=list)
    warnings: list[ValidationFinding] = field(default_factory=list)

    def error(self, field_path: str, message: str, section: str) -> None:
        self.errors.append(ValidationFinding(field_path, message, section))

    def warn(self, field_path: str, message: str, section: str) -> None:
        self.warnings.append(ValidationFinding(field_path, message, section))

    def result(self) -> ValidationResult:
        return ValidationResult(errors=tuple(self.errors), warnings=tuple(self.warnings))
