"""Presentation layer package (HTTP boundary)."""
