"""Data Transfer Objects (DTOs) for application layer."""

from authcore.application.dto.auth_dto import (
    AuthResponseOutput,
    LoginInput,
    RegisterUserInput,
    UserPublicOutput,
)
from authcore.application.dto.role_dto import (
    AssignmentAction,
    AssignmentHistoryOutput,
    AssignmentOutput,
    AssignmentResultOutput,
    CreateRoleInput,
    MessageOutput,
    RoleDetailOutput,
    RoleListItemOutput,
    RoleOutput,
    RoleUsersOutput,
    SetAssignmentInput,
    UpdateRoleInput,
    UserSummaryOutput,
)
from authcore.application.dto.token_dto import IssuedToken, TokenClaims
from authcore.application.dto.user_dto import SetUserStateInput

__all__ = [
    # Auth DTOs
    "AuthResponseOutput",
    "LoginInput",
    "RegisterUserInput",
    "UserPublicOutput",
    # Role DTOs
    "AssignmentAction",
    "AssignmentHistoryOutput",
    "AssignmentOutput",
    "AssignmentResultOutput",
    "CreateRoleInput",
    "MessageOutput",
    "RoleDetailOutput",
    "RoleListItemOutput",
    "RoleOutput",
    "RoleUsersOutput",
    "SetAssignmentInput",
    "UpdateRoleInput",
    "UserSummaryOutput",
    # Token DTOs
    "IssuedToken",
    "TokenClaims",
    # User DTOs
    "SetUserStateInput",
]
