"""Statusboard HTTP API."""
