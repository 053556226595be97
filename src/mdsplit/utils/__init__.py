"""Utility helpers for mdsplit."""
