"""Admin dashboard core: RBAC domain, application use cases and adapters."""

__version__ = "0.1.0"
