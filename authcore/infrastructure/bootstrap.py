"""
Startup bootstrap.

Seeds the configured roles and, when configured, a first superadmin
account. Every step is idempotent: existing roles and users are left
untouched, so the bootstrap runs on every start.
"""

import logging
from typing import Iterable, Optional

from authcore.application.clock import Clock, utc_now
from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.domain.entities.role import Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.config.container import Container

logger = logging.getLogger(__name__)

BOOTSTRAP_ADMIN_NAME = "Administrator"


async def seed_roles(
    uow: UnitOfWorkPort,
    role_names: Iterable[str],
    clock: Clock = utc_now,
) -> list[str]:
    """
    Create the roles that do not exist yet.

    Returns:
        Names of the roles created by this call
    """
    created = []
    async with uow:
        for name in role_names:
            if await uow.roles.get_by_name(name) is not None:
                continue
            now = clock()
            await uow.roles.add(Role(id=None, name=name, created_at=now, updated_at=now))
            created.append(name)

    if created:
        logger.info(f"Seeded roles: {', '.join(created)}")
    return created


async def ensure_superadmin(
    uow: UnitOfWorkPort,
    email: str,
    password: str,
    password_hasher: PasswordHasherPort,
    role_name: str = "superadmin",
    clock: Clock = utc_now,
) -> Optional[int]:
    """
    Create the first superadmin unless the email is already registered.

    Args:
        uow: Unit of Work for managing transactions
        email: Admin email
        password: Admin password (hashed before storage)
        password_hasher: Produces the stored digest
        role_name: Role granted to the admin
        clock: Source of the current UTC time

    Returns:
        Id of the created user, or None when nothing was created

    Raises:
        RuntimeError: If the superadmin role does not exist
    """
    async with uow:
        admin_email = Email(email)
        if await uow.users.exists_by_email(admin_email):
            return None

        role = await uow.roles.get_by_name(role_name)
        if role is None:
            raise RuntimeError(f"Role '{role_name}' must exist before creating the admin")

        now = clock()
        user = await uow.users.add(
            User(
                id=None,
                email=admin_email,
                name=BOOTSTRAP_ADMIN_NAME,
                password_hash=PasswordHash(password_hasher.hash(password)),
                email_verified=True,
                created_at=now,
                updated_at=now,
            )
        )
        await uow.assignments.add(RoleAssignment.grant(user.id, role.id, now))

    logger.info("Bootstrap superadmin created", extra={"user_id": user.id})
    return user.id


async def run_bootstrap(container: Container) -> None:
    """Seed roles and the optional superadmin for a container's store."""
    settings = container.settings

    async with container.unit_of_work() as uow:
        await seed_roles(uow, settings.seed_role_names_list, container.clock)

    if settings.bootstrap_admin_email and settings.bootstrap_admin_password:
        async with container.unit_of_work() as uow:
            await ensure_superadmin(
                uow,
                settings.bootstrap_admin_email,
                settings.bootstrap_admin_password,
                container.password_hasher,
                role_name=settings.superadmin_role_name,
                clock=container.clock,
            )
