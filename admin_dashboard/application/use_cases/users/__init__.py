"""User management use cases."""

from admin_dashboard.application.use_cases.users.create_user import CreateUserUseCase
from admin_dashboard.application.use_cases.users.delete_user import DeleteUserUseCase
from admin_dashboard.application.use_cases.users.get_user import GetUserUseCase
from admin_dashboard.application.use_cases.users.list_users import ListUsersUseCase
from admin_dashboard.application.use_cases.users.update_user import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
]
