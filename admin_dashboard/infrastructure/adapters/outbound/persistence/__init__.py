"""Persistence adapters: in-memory and PostgreSQL."""
