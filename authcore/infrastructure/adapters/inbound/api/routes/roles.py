"""
Role management API routes.

- Role CRUD and state toggle (superadmin)
- Role listing and detail (any authenticated user)
- Role holders, grant/revoke and assignment history (admin or superadmin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from authcore.application.dto.role_dto import (
    MAX_USER_ID,
    AssignmentHistoryOutput,
    AssignmentResultOutput,
    CreateRoleInput,
    MessageOutput,
    RoleDetailOutput,
    RoleListItemOutput,
    RoleOutput,
    RoleUsersOutput,
    SetAssignmentInput,
    UpdateRoleInput,
)
from authcore.application.use_cases.roles import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetAssignmentHistoryUseCase,
    GetRoleUseCase,
    ListRolesUseCase,
    ListRoleUsersUseCase,
    SetRoleAssignmentUseCase,
    ToggleRoleStateUseCase,
    UpdateRoleUseCase,
)
from authcore.infrastructure.adapters.inbound.api.dependencies import (
    admin_or_superadmin,
    get_assignment_history_use_case,
    get_create_role_use_case,
    get_delete_role_use_case,
    get_list_role_users_use_case,
    get_list_roles_use_case,
    get_role_use_case,
    get_set_role_assignment_use_case,
    get_token_claims,
    get_toggle_role_state_use_case,
    get_update_role_use_case,
    superadmin_only,
)

router = APIRouter(prefix="/roles", tags=["Roles"])

RoleId = Annotated[int, Path(ge=1, le=2**31 - 1, description="Role id")]
UserId = Annotated[int, Path(ge=1, le=MAX_USER_ID, description="User id")]


@router.post(
    "",
    response_model=RoleOutput,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(superadmin_only)],
    summary="Create a role",
)
async def create_role(
    payload: CreateRoleInput,
    use_case: Annotated[CreateRoleUseCase, Depends(get_create_role_use_case)],
) -> RoleOutput:
    return await use_case.execute(payload)


@router.get(
    "",
    response_model=list[RoleListItemOutput],
    dependencies=[Depends(get_token_claims)],
    summary="List roles with their active assignment counts",
)
async def list_roles(
    use_case: Annotated[ListRolesUseCase, Depends(get_list_roles_use_case)],
) -> list[RoleListItemOutput]:
    return await use_case.execute()


@router.get(
    "/{role_id}",
    response_model=RoleDetailOutput,
    dependencies=[Depends(get_token_claims)],
    summary="Get a role with its active assignments",
)
async def get_role(
    role_id: RoleId,
    use_case: Annotated[GetRoleUseCase, Depends(get_role_use_case)],
) -> RoleDetailOutput:
    return await use_case.execute(role_id)


@router.patch(
    "/{role_id}",
    response_model=RoleOutput,
    dependencies=[Depends(superadmin_only)],
    summary="Update a role",
)
async def update_role(
    role_id: RoleId,
    payload: UpdateRoleInput,
    use_case: Annotated[UpdateRoleUseCase, Depends(get_update_role_use_case)],
) -> RoleOutput:
    return await use_case.execute(role_id, payload)


@router.delete(
    "/{role_id}",
    response_model=MessageOutput,
    dependencies=[Depends(superadmin_only)],
    summary="Delete a role without active assignments",
)
async def delete_role(
    role_id: RoleId,
    use_case: Annotated[DeleteRoleUseCase, Depends(get_delete_role_use_case)],
) -> MessageOutput:
    return await use_case.execute(role_id)


@router.patch(
    "/{role_id}/toggle-state",
    response_model=RoleOutput,
    dependencies=[Depends(superadmin_only)],
    summary="Flip a role between active and inactive",
)
async def toggle_role_state(
    role_id: RoleId,
    use_case: Annotated[ToggleRoleStateUseCase, Depends(get_toggle_role_state_use_case)],
) -> RoleOutput:
    return await use_case.execute(role_id)


@router.get(
    "/{role_id}/users",
    response_model=RoleUsersOutput,
    dependencies=[Depends(admin_or_superadmin)],
    summary="List users actively holding a role",
)
async def list_role_users(
    role_id: RoleId,
    use_case: Annotated[ListRoleUsersUseCase, Depends(get_list_role_users_use_case)],
) -> RoleUsersOutput:
    return await use_case.execute(role_id)


@router.post(
    "/{role_id}/assign",
    response_model=AssignmentResultOutput,
    dependencies=[Depends(admin_or_superadmin)],
    summary="Grant or revoke a role",
)
async def set_role_assignment(
    role_id: RoleId,
    payload: SetAssignmentInput,
    use_case: Annotated[SetRoleAssignmentUseCase, Depends(get_set_role_assignment_use_case)],
) -> AssignmentResultOutput:
    return await use_case.execute(role_id, payload)


@router.get(
    "/{role_id}/users/{user_id}/history",
    response_model=AssignmentHistoryOutput,
    dependencies=[Depends(admin_or_superadmin)],
    summary="Every grant and revoke of a role to a user, newest first",
)
async def get_assignment_history(
    role_id: RoleId,
    user_id: UserId,
    use_case: Annotated[GetAssignmentHistoryUseCase, Depends(get_assignment_history_use_case)],
) -> AssignmentHistoryOutput:
    return await use_case.execute(role_id, user_id)
