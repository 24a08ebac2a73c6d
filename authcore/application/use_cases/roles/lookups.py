"""Shared lookups for role use cases."""

from authcore.application.exceptions import NotFoundError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.domain.entities.role import Role
from authcore.domain.entities.user import User


async def get_role_or_raise(uow: UnitOfWorkPort, role_id: int) -> Role:
    role = await uow.roles.get_by_id(role_id)
    if role is None:
        raise NotFoundError(
            message=f"Role with id {role_id} not found",
            resource_type="Role",
            resource_id=str(role_id),
        )
    return role


async def get_user_or_raise(uow: UnitOfWorkPort, user_id: int) -> User:
    user = await uow.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError(
            message=f"User with id {user_id} not found",
            resource_type="User",
            resource_id=str(user_id),
        )
    return user
