"""Validation constants and display formatting rules."""
