"""HTTP middleware: request ids and route authorization."""

from admin_dashboard.presentation.middleware.authorization import (
    AuthorizationConfig,
    AuthorizedContext,
    admin_required,
    authorization_dependency,
    authorization_required,
    permission_required,
    super_admin_required,
    with_authorization,
)
from admin_dashboard.presentation.middleware.request_id import RequestIDMiddleware

__all__ = [
    "AuthorizationConfig",
    "AuthorizedContext",
    "RequestIDMiddleware",
    "admin_required",
    "authorization_dependency",
    "authorization_required",
    "permission_required",
    "super_admin_required",
    "with_authorization",
]
