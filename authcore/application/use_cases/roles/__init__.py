"""Role management use cases."""

from authcore.application.use_cases.roles.create_role import CreateRoleUseCase
from authcore.application.use_cases.roles.delete_role import DeleteRoleUseCase
from authcore.application.use_cases.roles.get_assignment_history import (
    GetAssignmentHistoryUseCase,
)
from authcore.application.use_cases.roles.get_role import GetRoleUseCase
from authcore.application.use_cases.roles.list_role_users import ListRoleUsersUseCase
from authcore.application.use_cases.roles.list_roles import ListRolesUseCase
from authcore.application.use_cases.roles.set_role_assignment import (
    SetRoleAssignmentUseCase,
)
from authcore.application.use_cases.roles.toggle_role_state import ToggleRoleStateUseCase
from authcore.application.use_cases.roles.update_role import UpdateRoleUseCase

__all__ = [
    "CreateRoleUseCase",
    "DeleteRoleUseCase",
    "GetAssignmentHistoryUseCase",
    "GetRoleUseCase",
    "ListRoleUsersUseCase",
    "ListRolesUseCase",
    "SetRoleAssignmentUseCase",
    "ToggleRoleStateUseCase",
    "UpdateRoleUseCase",
]
