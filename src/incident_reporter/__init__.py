"""Incident reporter: validation and PDF export for workplace incident records."""

__version__ = "0.1.0"
