"""
Authentication API routes.

- User registration
- User login
- Current user profile
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from authcore.application.dto.auth_dto import (
    AuthResponseOutput,
    LoginInput,
    RegisterUserInput,
    UserPublicOutput,
)
from authcore.application.use_cases.auth import (
    AuthenticateUserUseCase,
    GetCurrentUserUseCase,
    RegisterUserUseCase,
)
from authcore.infrastructure.adapters.inbound.api.dependencies import (
    CurrentClaims,
    get_authenticate_user_use_case,
    get_current_user_use_case,
    get_register_user_use_case,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponseOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="""
    Register a new account and receive a session token.

    **Password Requirements:**
    - 8 to 128 characters
    - At least 1 uppercase letter, 1 lowercase letter, 1 digit
    - At least 1 symbol among @$!%*?&

    The default role is granted when it exists.
    """,
)
async def register(
    payload: RegisterUserInput,
    use_case: Annotated[RegisterUserUseCase, Depends(get_register_user_use_case)],
) -> AuthResponseOutput:
    return await use_case.execute(payload)


@router.post(
    "/login",
    response_model=AuthResponseOutput,
    summary="Log in with email and password",
    description="""
    Authenticate and receive a session token.

    After too many consecutive failures the account is locked for a while;
    a locked account is rejected even with the right password.
    """,
)
async def login(
    payload: LoginInput,
    use_case: Annotated[AuthenticateUserUseCase, Depends(get_authenticate_user_use_case)],
) -> AuthResponseOutput:
    return await use_case.execute(payload)


@router.get(
    "/profile",
    response_model=UserPublicOutput,
    summary="Get the authenticated user",
)
async def profile(
    claims: CurrentClaims,
    use_case: Annotated[GetCurrentUserUseCase, Depends(get_current_user_use_case)],
) -> UserPublicOutput:
    return await use_case.execute(claims)
