"""
Infrastructure layer configuration.

This package contains:
- Settings (pydantic-settings)
- Logging configuration
- Database connection and session management
- Dependency injection helpers
"""

from admin_dashboard.infrastructure.config.database import DatabaseConfig
from admin_dashboard.infrastructure.config.dependencies import (
    create_uow_dependency,
    create_uow_factory,
)
from admin_dashboard.infrastructure.config.logging import setup_logging
from admin_dashboard.infrastructure.config.settings import Settings, get_settings

__all__ = [
    "DatabaseConfig",
    "Settings",
    "create_uow_dependency",
    "create_uow_factory",
    "get_settings",
    "setup_logging",
]
