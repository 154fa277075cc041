"""Presentation layer: user-facing surfaces."""
