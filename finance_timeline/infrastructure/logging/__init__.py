"""Logging helpers for the finance timeline services."""
