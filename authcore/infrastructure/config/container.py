"""
Wiring of adapters into use cases.

The container is built once from ``Settings`` and shared by the HTTP
adapter and the startup bootstrap. It is the only place that chooses
between the PostgreSQL and the in-memory store.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator, Optional

from authcore.application.clock import Clock, utc_now
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.domain.services.lockout_policy import LockoutPolicy
from authcore.infrastructure.adapters.outbound.persistence.memory.store import InMemoryStore
from authcore.infrastructure.adapters.outbound.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
)
from authcore.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from authcore.infrastructure.config.database import DatabaseConfig
from authcore.infrastructure.config.settings import Settings
from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher
from authcore.infrastructure.security.token_issuer import JoseTokenIssuer

logger = logging.getLogger(__name__)


class Container:
    """
    Holds the long-lived adapters of one application instance.

    Attributes:
        settings: Validated settings
        password_hasher: Argon2id hasher
        token_issuer: JWT issuer/validator
        lockout_policy: Login lockout thresholds
        clock: Source of the current UTC time
        db_config: Engine owner when the PostgreSQL backend is selected
        store: Store when the in-memory backend is selected
    """

    def __init__(
        self,
        settings: Settings,
        clock: Clock = utc_now,
        store: Optional[InMemoryStore] = None,
    ):
        self.settings = settings
        self.clock = clock

        self.password_hasher = Argon2PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )
        self.token_issuer = JoseTokenIssuer(
            secret=settings.jwt_secret,
            lifetime_seconds=settings.token_lifetime_seconds,
            algorithm=settings.jwt_algorithm,
            clock=clock,
        )
        self.lockout_policy = LockoutPolicy(
            max_attempts=settings.max_login_attempts,
            lockout_duration=timedelta(seconds=settings.lockout_seconds),
        )

        self.db_config: Optional[DatabaseConfig] = None
        self.store: Optional[InMemoryStore] = None

        if settings.storage_backend == "memory":
            self.store = store if store is not None else InMemoryStore()
        else:
            self.db_config = DatabaseConfig.from_settings(settings)

        logger.info(f"Storage backend: {settings.storage_backend}")

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[UnitOfWorkPort]:
        """
        Provide a fresh unit of work and release its resources afterwards.

        Usage:
            async with container.unit_of_work() as uow:
                use_case = CreateRoleUseCase(uow)
                await use_case.execute(...)
        """
        if self.db_config is not None:
            session = self.db_config.get_session()
            uow = PostgresUnitOfWork(session)
        else:
            uow = InMemoryUnitOfWork(self.store)

        try:
            yield uow
        finally:
            await uow.close()

    async def health_check(self) -> bool:
        if self.db_config is not None:
            return await self.db_config.health_check()
        return True

    async def close(self) -> None:
        if self.db_config is not None:
            await self.db_config.close()
