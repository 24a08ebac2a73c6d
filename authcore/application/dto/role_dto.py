"""Role management DTOs (Data Transfer Objects)."""

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from authcore.domain.entities.role import MAX_ROLE_NAME_LENGTH, Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.entity_state import EntityState

# BIGINT identity column
MAX_USER_ID = 2**63 - 1


def _strip_name(value):
    if isinstance(value, str):
        return value.strip()
    return value


class AssignmentAction(str, enum.Enum):
    """Operation requested on a (user, role) assignment."""

    ASSIGN = "assign"
    REVOKE = "revoke"


class CreateRoleInput(BaseModel):
    """Input DTO for role creation."""

    name: str = Field(..., min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    description: Optional[str] = Field(None, max_length=1000)
    state: EntityState = Field(default=EntityState.ACTIVE)

    model_config = {"frozen": True}

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return _strip_name(value)


class UpdateRoleInput(BaseModel):
    """
    Input DTO for a partial role update.

    Only the fields present in the request are applied.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    description: Optional[str] = Field(None, max_length=1000)
    state: Optional[EntityState] = None

    model_config = {"frozen": True}

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return _strip_name(value)


class SetAssignmentInput(BaseModel):
    """Input DTO for granting or revoking a role."""

    user_id: str = Field(..., alias="idUsuario", pattern=r"^\d+$", description="User id")
    action: AssignmentAction

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("user_id")
    @classmethod
    def user_id_in_range(cls, value: str) -> str:
        if not 1 <= int(value) <= MAX_USER_ID:
            raise ValueError(f"must be between 1 and {MAX_USER_ID}")
        return value


class UserSummaryOutput(BaseModel):
    """Short user projection attached to assignments."""

    id: str
    email: str
    name: str
    is_active: bool

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, user: User) -> "UserSummaryOutput":
        return cls(
            id=str(user.id),
            email=user.email.value,
            name=user.name,
            is_active=user.is_active,
        )


class RoleOutput(BaseModel):
    """Output DTO for a role."""

    id: str
    name: str
    description: Optional[str] = None
    state: EntityState
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, role: Role) -> "RoleOutput":
        return cls(
            id=str(role.id),
            name=role.name,
            description=role.description,
            state=role.state,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


class RoleListItemOutput(RoleOutput):
    """Role with its number of active assignments."""

    active_assignments: int = 0

    @classmethod
    def from_entity(cls, role: Role, active_assignments: int = 0) -> "RoleListItemOutput":
        base = RoleOutput.from_entity(role).model_dump()
        return cls(**base, active_assignments=active_assignments)


class AssignmentOutput(BaseModel):
    """Output DTO for a role assignment."""

    id: str
    user_id: str
    role_id: str
    state: EntityState
    assigned_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
    user: Optional[UserSummaryOutput] = None
    role: Optional[RoleOutput] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(
        cls,
        assignment: RoleAssignment,
        user: Optional[User] = None,
        role: Optional[Role] = None,
    ) -> "AssignmentOutput":
        """
        Create DTO from RoleAssignment entity.

        Args:
            assignment: Assignment entity
            user: Assigned user, embedded as a summary when given
            role: Assigned role, embedded when given

        Returns:
            AssignmentOutput DTO
        """
        return cls(
            id=str(assignment.id),
            user_id=str(assignment.user_id),
            role_id=str(assignment.role_id),
            state=assignment.state,
            assigned_at=assignment.assigned_at,
            revoked_at=assignment.revoked_at,
            user=UserSummaryOutput.from_entity(user) if user is not None else None,
            role=RoleOutput.from_entity(role) if role is not None else None,
        )


class RoleDetailOutput(RoleOutput):
    """Role with its active assignments."""

    assignments: list[AssignmentOutput] = Field(default_factory=list)


class RoleUsersOutput(BaseModel):
    """Active assignments of a role."""

    role: RoleOutput
    assignments: list[AssignmentOutput] = Field(default_factory=list)
    total: int = 0

    model_config = {"frozen": True}


class AssignmentResultOutput(BaseModel):
    """Result of an assign or revoke request."""

    message: str
    assignment: AssignmentOutput

    model_config = {"frozen": True}


class AssignmentHistoryOutput(BaseModel):
    """Every assignment of a (user, role) pair, newest first."""

    role: RoleOutput
    user: UserSummaryOutput
    assignments: list[AssignmentOutput] = Field(default_factory=list)

    model_config = {"frozen": True}


class MessageOutput(BaseModel):
    """Plain acknowledgement."""

    message: str

    model_config = {"frozen": True}
