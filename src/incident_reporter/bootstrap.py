"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from incident_reporter.application.use_cases.generate_report import GenerateReportUseCase
from incident_reporter.application.use_cases.validate_incident import ValidateIncidentUseCase
from incident_reporter.config.models import ReportLayout
from incident_reporter.domain.ports.clock import ClockPort
from incident_reporter.domain.ports.config_provider import ConfigProviderPort
from incident_reporter.domain.ports.document_renderer import DocumentRendererPort
from incident_reporter.infrastructure.clock import SystemClock
from incident_reporter.infrastructure.config.json_config_provider import JsonConfigProvider
from incident_reporter.infrastructure.renderers.pdf_renderer import PageFlowRenderer
from incident_reporter.mappers.document_mapper import DocumentModelMapper
from incident_reporter.validators.incident_validator import IncidentValidator


class Container:
    """Simple dependency injection container.

    Wires the infrastructure implementations to the domain ports and
    provides pre-configured use cases.

    Usage::

        container = Container()
        result = container.generate_report().execute(record, options, sink)
    """

    def __init__(
        self, config_path: Path | str | None = None, clock: ClockPort | None = None
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config_provider = JsonConfigProvider(config_path)
        self._config: ReportLayout = self._config_provider.get_config()
        self._clock = clock or SystemClock()

        self._validator = IncidentValidator(self._clock)
        self._mapper = DocumentModelMapper(self._clock)
        self._pdf_renderer = PageFlowRenderer(self._config)

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> ReportLayout:
        return self._config

    @property
    def clock(self) -> ClockPort:
        return self._clock

    @property
    def validator(self) -> IncidentValidator:
        return self._validator

    @property
    def mapper(self) -> DocumentModelMapper:
        return self._mapper

    @property
    def renderer(self) -> DocumentRendererPort:
        return self._pdf_renderer

    # -- Use Case factories --------------------------------------------------

    def validate_incident(self) -> ValidateIncidentUseCase:
        """Create a use case for record validation."""
        return ValidateIncidentUseCase(validator=self._validator)

    def generate_report(self) -> GenerateReportUseCase:
        """Create a use case for validated report generation."""
        return GenerateReportUseCase(
            validator=self._validator, mapper=self._mapper, renderer=self._pdf_renderer
        )
