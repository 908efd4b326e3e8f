"""Statusboard — a small service-status dashboard."""

__version__ = "0.1.0"
