"""Punktual: add-to-calendar links and embeddable button code."""

__version__ = "1.0.0"
