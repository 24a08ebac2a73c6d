"""
FastAPI dependencies for authentication, authorization and use cases.

Provides:
- The application container and a per-request unit of work
- Bearer token extraction and validation
- Role guards working on the claims of a validated token
- Use case factories
"""

import logging
from typing import Annotated, AsyncIterator, Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authcore.application.dto.token_dto import TokenClaims
from authcore.application.exceptions import ForbiddenError, UnauthorizedError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.auth import (
    AuthenticateUserUseCase,
    GetCurrentUserUseCase,
    RegisterUserUseCase,
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
from authcore.application.use_cases.users import SetUserActiveStateUseCase
from authcore.infrastructure.config.container import Container

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI
security = HTTPBearer(
    scheme_name="Bearer",
    description="Enter your session token",
    auto_error=False,
)


def get_container(request: Request) -> Container:
    return request.app.state.container


async def get_uow(
    container: Annotated[Container, Depends(get_container)],
) -> AsyncIterator[UnitOfWorkPort]:
    """One unit of work per request, released when the request ends."""
    async with container.unit_of_work() as uow:
        yield uow


ContainerDep = Annotated[Container, Depends(get_container)]
UnitOfWorkDep = Annotated[UnitOfWorkPort, Depends(get_uow)]


# ============================================================================
# Authentication
# ============================================================================


async def get_token_claims(
    container: ContainerDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenClaims:
    """
    Extract and validate the bearer token.

    Raises:
        UnauthorizedError: If the Authorization header is missing
        InvalidTokenError: If the token is malformed, tampered or expired
    """
    if credentials is None:
        logger.warning("Authentication failed: missing Bearer token")
        raise UnauthorizedError("Missing authentication credentials")

    return container.token_issuer.decode(credentials.credentials)


CurrentClaims = Annotated[TokenClaims, Depends(get_token_claims)]


def require_roles(*role_names: str) -> Callable:
    """
    Build a dependency admitting tokens that carry any of ``role_names``.

    Usage:
        @router.post("", dependencies=[Depends(require_roles("superadmin"))])
    """

    async def check_roles(claims: CurrentClaims) -> TokenClaims:
        if not claims.has_any_role(*role_names):
            logger.warning(
                f"Access denied: user {claims.sub} lacks roles {list(role_names)}"
            )
            raise ForbiddenError(
                "Insufficient permissions",
                required_roles=list(role_names),
            )
        return claims

    return check_roles


async def superadmin_only(request: Request, claims: CurrentClaims) -> TokenClaims:
    """Admit superadmins only."""
    settings = get_container(request).settings
    return await require_roles(settings.superadmin_role_name)(claims)


async def admin_or_superadmin(request: Request, claims: CurrentClaims) -> TokenClaims:
    """Admit admins and superadmins."""
    settings = get_container(request).settings
    return await require_roles(settings.admin_role_name, settings.superadmin_role_name)(claims)


# ============================================================================
# Use Case Factories
# ============================================================================


def get_authenticate_user_use_case(
    uow: UnitOfWorkDep, container: ContainerDep
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        uow,
        password_hasher=container.password_hasher,
        token_issuer=container.token_issuer,
        lockout_policy=container.lockout_policy,
        clock=container.clock,
    )


def get_register_user_use_case(
    uow: UnitOfWorkDep, container: ContainerDep
) -> RegisterUserUseCase:
    settings = container.settings
    return RegisterUserUseCase(
        uow,
        password_hasher=container.password_hasher,
        token_issuer=container.token_issuer,
        default_role_name=settings.default_role_name,
        require_default_role=settings.require_default_role,
        clock=container.clock,
    )


def get_current_user_use_case(uow: UnitOfWorkDep) -> GetCurrentUserUseCase:
    return GetCurrentUserUseCase(uow)


def get_create_role_use_case(uow: UnitOfWorkDep, container: ContainerDep) -> CreateRoleUseCase:
    return CreateRoleUseCase(uow, clock=container.clock)


def get_list_roles_use_case(uow: UnitOfWorkDep) -> ListRolesUseCase:
    return ListRolesUseCase(uow)


def get_role_use_case(uow: UnitOfWorkDep) -> GetRoleUseCase:
    return GetRoleUseCase(uow)


def get_update_role_use_case(uow: UnitOfWorkDep, container: ContainerDep) -> UpdateRoleUseCase:
    return UpdateRoleUseCase(uow, clock=container.clock)


def get_delete_role_use_case(uow: UnitOfWorkDep) -> DeleteRoleUseCase:
    return DeleteRoleUseCase(uow)


def get_toggle_role_state_use_case(
    uow: UnitOfWorkDep, container: ContainerDep
) -> ToggleRoleStateUseCase:
    return ToggleRoleStateUseCase(uow, clock=container.clock)


def get_list_role_users_use_case(uow: UnitOfWorkDep) -> ListRoleUsersUseCase:
    return ListRoleUsersUseCase(uow)


def get_set_role_assignment_use_case(
    uow: UnitOfWorkDep, container: ContainerDep
) -> SetRoleAssignmentUseCase:
    return SetRoleAssignmentUseCase(uow, clock=container.clock)


def get_assignment_history_use_case(uow: UnitOfWorkDep) -> GetAssignmentHistoryUseCase:
    return GetAssignmentHistoryUseCase(uow)


def get_set_user_active_state_use_case(
    uow: UnitOfWorkDep, container: ContainerDep
) -> SetUserActiveStateUseCase:
    return SetUserActiveStateUseCase(uow, clock=container.clock)
