"""
Route authorization middleware.

Wraps request handlers with RBAC checks. A handler is only invoked once the
authenticated user satisfies every requirement of its AuthorizationConfig;
otherwise the client receives a structured JSON rejection:

- 401 when no authenticated user can be resolved
- 403 when a guard denies access, or the handler raises UnauthorizedError

Three forms are exposed:

    # Wrapper (Starlette routes, FastAPI add_route)
    endpoint = with_authorization(handler, AuthorizationConfig(permission="users:create"))

    # Decorator
    @authorization_required(AuthorizationConfig(any_roles=["ADMIN", "SUPER_ADMIN"]))
    async def handler(request, context): ...

    # FastAPI dependency
    @app.delete("/users/{user_id}")
    async def delete_user(user: User = Depends(permission_required("users:delete"))): ...
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import UnauthorizedError
from admin_dashboard.domain.services.authorization import (
    require_admin,
    require_all_permissions,
    require_all_roles,
    require_any_permission,
    require_any_role,
    require_permission,
    require_role,
    require_super_admin,
)

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED_MESSAGE = "Authentication required"
CUSTOM_CHECK_FAILED_MESSAGE = "Custom authorization check failed"

CustomCheck = Callable[[User], Union[bool, Awaitable[bool]]]
UserResolver = Callable[[Request], Union[Optional[User], Awaitable[Optional[User]]]]


@dataclass(frozen=True)
class AuthorizationConfig:
    """
    Declared requirements of a route.

    A requirement applies when its value is not None. Requirements are
    checked in field order and the first failure wins.

    The account-status check belongs to the guards, so a config holding only
    ``custom_check`` also admits inactive and suspended users.
    """

    permission: Optional[str] = None
    any_permissions: Optional[list[str]] = None
    all_permissions: Optional[list[str]] = None
    role: Optional[str] = None
    any_roles: Optional[list[str]] = None
    all_roles: Optional[list[str]] = None
    require_admin: bool = False
    require_super_admin: bool = False
    custom_check: Optional[CustomCheck] = None
    error_message: Optional[str] = None


@dataclass
class AuthorizedContext:
    """What an authorized handler receives besides the request."""

    user: User
    path_params: dict[str, Any] = field(default_factory=dict)


AuthorizedHandler = Callable[[Request, AuthorizedContext], Any]


class AuthenticationRequired(Exception):
    """Raised internally when no user can be resolved from the request."""


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def default_user_resolver(request: Request) -> Optional[User]:
    """Read the user placed on ``request.state.user`` by authentication."""
    return getattr(request.state, "user", None)


async def _run_custom_check(check: CustomCheck, user: User) -> bool:
    try:
        return bool(await _maybe_await(check(user)))
    except Exception:
        logger.exception(f"Custom authorization check raised for user {user.id}")
        return False


async def authorize(
    request: Request,
    config: AuthorizationConfig,
    user_resolver: UserResolver = default_user_resolver,
) -> User:
    """
    Resolve the user and run every configured check.

    Args:
        request: Incoming request
        config: Declared requirements
        user_resolver: Callable returning the authenticated user (or None)

    Returns:
        The authorized user

    Raises:
        AuthenticationRequired: If no user is resolved
        UnauthorizedError: If a check fails
    """
    user = await _maybe_await(user_resolver(request))
    if user is None:
        raise AuthenticationRequired(AUTHENTICATION_REQUIRED_MESSAGE)

    if config.permission is not None:
        require_permission(user, config.permission)

    if config.any_permissions is not None:
        require_any_permission(user, config.any_permissions)

    if config.all_permissions is not None:
        require_all_permissions(user, config.all_permissions)

    if config.role is not None:
        require_role(user, config.role)

    if config.any_roles is not None:
        require_any_role(user, config.any_roles)

    if config.all_roles is not None:
        require_all_roles(user, config.all_roles)

    if config.require_admin:
        require_admin(user)

    if config.require_super_admin:
        require_super_admin(user)

    if config.custom_check is not None:
        if not await _run_custom_check(config.custom_check, user):
            raise UnauthorizedError(config.error_message or CUSTOM_CHECK_FAILED_MESSAGE)

    return user


def _rejection(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": {},
            },
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
            },
        },
    )


def with_authorization(
    handler: AuthorizedHandler,
    config: Optional[AuthorizationConfig] = None,
    user_resolver: UserResolver = default_user_resolver,
) -> Callable[[Request], Awaitable[Any]]:
    """
    Wrap a handler with authorization checks.

    Args:
        handler: ``handler(request, context)``, sync or async
        config: Declared requirements (none by default: any resolved user)
        user_resolver: Callable returning the authenticated user (or None)

    Returns:
        Async endpoint taking only the request. An UnauthorizedError raised
        by the handler becomes a 403; other exceptions propagate.
    """
    config = config or AuthorizationConfig()

    async def endpoint(request: Request) -> Any:
        try:
            user = await authorize(request, config, user_resolver)
            request.state.user = user
            context = AuthorizedContext(user=user, path_params=dict(request.path_params))
            return await _maybe_await(handler(request, context))
        except AuthenticationRequired:
            logger.warning(f"Access denied: unauthenticated request to {request.url.path}")
            return _rejection(
                request,
                status.HTTP_401_UNAUTHORIZED,
                "AUTHENTICATION_REQUIRED",
                AUTHENTICATION_REQUIRED_MESSAGE,
            )
        except UnauthorizedError as exc:
            logger.warning(
                f"Access denied: {exc.message} (path={request.url.path}, "
                f"request_id={getattr(request.state, 'request_id', 'unknown')})"
            )
            return _rejection(request, status.HTTP_403_FORBIDDEN, "FORBIDDEN", exc.message)

    endpoint.__name__ = getattr(handler, "__name__", "endpoint")
    endpoint.__doc__ = getattr(handler, "__doc__", None)
    return endpoint


def authorization_required(
    config: Optional[AuthorizationConfig] = None,
    user_resolver: UserResolver = default_user_resolver,
) -> Callable[[AuthorizedHandler], Callable[[Request], Awaitable[Any]]]:
    """Decorator form of with_authorization()."""

    def decorator(handler: AuthorizedHandler) -> Callable[[Request], Awaitable[Any]]:
        return with_authorization(handler, config, user_resolver)

    return decorator


# ============================================================================
# FastAPI dependencies
# ============================================================================


def authorization_dependency(
    config: Optional[AuthorizationConfig] = None,
    user_resolver: UserResolver = default_user_resolver,
) -> Callable[[Request], Awaitable[User]]:
    """
    Build a FastAPI dependency enforcing a configuration.

    The dependency returns the authorized user, or raises HTTPException
    with status 401 or 403.
    """
    config = config or AuthorizationConfig()

    async def dependency(request: Request) -> User:
        try:
            user = await authorize(request, config, user_resolver)
        except AuthenticationRequired:
            logger.warning(f"Access denied: unauthenticated request to {request.url.path}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=AUTHENTICATION_REQUIRED_MESSAGE,
            )
        except UnauthorizedError as exc:
            logger.warning(f"Access denied: {exc.message} (path={request.url.path})")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=exc.message,
            )

        request.state.user = user
        return user

    return dependency


def permission_required(permission: str) -> Callable[[Request], Awaitable[User]]:
    """Dependency requiring a single permission."""
    return authorization_dependency(AuthorizationConfig(permission=permission))


def admin_required() -> Callable[[Request], Awaitable[User]]:
    """Dependency requiring the ADMIN or SUPER_ADMIN role."""
    return authorization_dependency(AuthorizationConfig(require_admin=True))


def super_admin_required() -> Callable[[Request], Awaitable[User]]:
    """Dependency requiring the SUPER_ADMIN role."""
    return authorization_dependency(AuthorizationConfig(require_super_admin=True))
