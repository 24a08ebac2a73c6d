"""
User administration API routes.

- Account activation and deactivation (superadmin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from authcore.application.dto.auth_dto import UserPublicOutput
from authcore.application.dto.role_dto import MAX_USER_ID
from authcore.application.dto.token_dto import TokenClaims
from authcore.application.dto.user_dto import SetUserStateInput
from authcore.application.use_cases.users import SetUserActiveStateUseCase
from authcore.infrastructure.adapters.inbound.api.dependencies import (
    get_set_user_active_state_use_case,
    superadmin_only,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.patch(
    "/{user_id}/state",
    response_model=UserPublicOutput,
    summary="Activate or deactivate an account",
    responses={
        403: {"description": "Not a superadmin, or deactivating yourself"},
        404: {"description": "User not found"},
        409: {"description": "Account already in the requested state"},
    },
)
async def set_user_state(
    user_id: Annotated[int, Path(ge=1, le=MAX_USER_ID, description="User id")],
    payload: SetUserStateInput,
    claims: Annotated[TokenClaims, Depends(superadmin_only)],
    use_case: Annotated[SetUserActiveStateUseCase, Depends(get_set_user_active_state_use_case)],
) -> UserPublicOutput:
    """
    Switch an account on or off.

    A deactivated account gets ACCOUNT_DISABLED at login and its existing
    tokens stop resolving on /auth/profile.
    """
    return await use_case.execute(user_id, payload, acting_user_id=claims.sub)
