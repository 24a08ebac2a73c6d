"""In-memory implementations of the repository ports."""

import dataclasses
from datetime import datetime
from typing import Optional

from authcore.application.clock import utc_now
from authcore.application.exceptions import ConflictError, NotFoundError
from authcore.domain.entities.role import Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.entity_state import EntityState
from authcore.infrastructure.adapters.outbound.persistence.memory.store import (
    InMemoryStore,
    Journal,
    detached,
)


class InMemoryUserRepository:
    """In-memory implementation of UserRepositoryPort."""

    def __init__(self, store: InMemoryStore, journal: Journal):
        self._store = store
        self._journal = journal

    def _check_unique(self, user: User) -> None:
        for other in self._store.users.values():
            if other.id == user.id:
                continue
            if other.email == user.email:
                raise ConflictError("Email already registered", "User", "email")
            if user.national_id and other.national_id == user.national_id:
                raise ConflictError("National id already registered", "User", "national_id")

    async def add(self, user: User) -> User:
        with self._store.lock:
            self._check_unique(user)
            now = utc_now()
            stored = dataclasses.replace(
                detached(user),
                id=self._store.next_id("users"),
                created_at=user.created_at or now,
                updated_at=user.updated_at or now,
            )
            self._store.users[stored.id] = stored
            self._journal.inserted("users", stored.id)
            return detached(stored)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        with self._store.lock:
            user = self._store.users.get(user_id)
            return detached(user) if user is not None else None

    async def get_by_email(self, email: Email) -> Optional[User]:
        with self._store.lock:
            for user in self._store.users.values():
                if user.email == email:
                    return detached(user)
            return None

    async def exists_by_email(self, email: Email) -> bool:
        return await self.get_by_email(email) is not None

    async def exists_by_national_id(self, national_id: str) -> bool:
        with self._store.lock:
            return any(u.national_id == national_id for u in self._store.users.values())

    async def update(self, user: User) -> User:
        with self._store.lock:
            previous = self._store.users.get(user.id)
            if previous is None:
                raise NotFoundError(f"User with id {user.id} not found", "User", str(user.id))
            self._check_unique(user)
            stored = detached(user)
            self._store.users[user.id] = stored
            self._journal.replaced("users", user.id, previous)
            return detached(stored)

    async def increment_failed_login_attempts(self, user_id: int, now: datetime) -> int:
        with self._store.lock:
            previous = self._store.users.get(user_id)
            if previous is None:
                raise NotFoundError(f"User with id {user_id} not found", "User", str(user_id))
            stored = dataclasses.replace(
                previous,
                failed_login_attempts=previous.failed_login_attempts + 1,
                updated_at=now,
            )
            self._store.users[user_id] = stored
            self._journal.replaced("users", user_id, previous)
            return stored.failed_login_attempts


class InMemoryRoleRepository:
    """In-memory implementation of RoleRepositoryPort."""

    def __init__(self, store: InMemoryStore, journal: Journal):
        self._store = store
        self._journal = journal

    def _check_unique(self, role: Role) -> None:
        for other in self._store.roles.values():
            if other.id != role.id and other.name == role.name:
                raise ConflictError("Role name already exists", "Role", "name")

    async def add(self, role: Role) -> Role:
        with self._store.lock:
            self._check_unique(role)
            now = utc_now()
            stored = dataclasses.replace(
                detached(role),
                id=self._store.next_id("roles"),
                created_at=role.created_at or now,
                updated_at=role.updated_at or now,
            )
            self._store.roles[stored.id] = stored
            self._journal.inserted("roles", stored.id)
            return detached(stored)

    async def get_by_id(self, role_id: int) -> Optional[Role]:
        with self._store.lock:
            role = self._store.roles.get(role_id)
            return detached(role) if role is not None else None

    async def get_by_name(self, name: str) -> Optional[Role]:
        with self._store.lock:
            for role in self._store.roles.values():
                if role.name == name:
                    return detached(role)
            return None

    async def list_all(self) -> list[Role]:
        with self._store.lock:
            roles = sorted(self._store.roles.values(), key=lambda r: r.name)
            return [detached(role) for role in roles]

    async def update(self, role: Role) -> Role:
        with self._store.lock:
            previous = self._store.roles.get(role.id)
            if previous is None:
                raise NotFoundError(f"Role with id {role.id} not found", "Role", str(role.id))
            self._check_unique(role)
            stored = detached(role)
            self._store.roles[role.id] = stored
            self._journal.replaced("roles", role.id, previous)
            return detached(stored)

    async def delete(self, role_id: int) -> None:
        with self._store.lock:
            previous = self._store.roles.pop(role_id, None)
            if previous is None:
                raise NotFoundError(f"Role with id {role_id} not found", "Role", str(role_id))
            self._journal.removed("roles", role_id, previous)


class InMemoryRoleAssignmentRepository:
    """
    In-memory implementation of RoleAssignmentRepositoryPort.

    The store lock makes the active-assignment check and the insert one
    atomic step.
    """

    def __init__(self, store: InMemoryStore, journal: Journal):
        self._store = store
        self._journal = journal

    def _active_rows(self):
        return (a for a in self._store.assignments.values() if a.state is EntityState.ACTIVE)

    async def add(self, assignment: RoleAssignment) -> RoleAssignment:
        with self._store.lock:
            if assignment.is_active and any(
                a.user_id == assignment.user_id and a.role_id == assignment.role_id
                for a in self._active_rows()
            ):
                raise ConflictError("User already has this role assigned", "RoleAssignment")
            stored = dataclasses.replace(
                detached(assignment),
                id=self._store.next_id("assignments"),
                assigned_at=assignment.assigned_at or utc_now(),
            )
            self._store.assignments[stored.id] = stored
            self._journal.inserted("assignments", stored.id)
            return detached(stored)

    async def update(self, assignment: RoleAssignment) -> RoleAssignment:
        with self._store.lock:
            previous = self._store.assignments.get(assignment.id)
            if previous is None:
                raise NotFoundError(
                    f"Assignment with id {assignment.id} not found",
                    "RoleAssignment",
                    str(assignment.id),
                )
            stored = dataclasses.replace(
                previous, state=assignment.state, revoked_at=assignment.revoked_at
            )
            self._store.assignments[assignment.id] = stored
            self._journal.replaced("assignments", assignment.id, previous)
            return detached(stored)

    async def get_active(self, user_id: int, role_id: int) -> Optional[RoleAssignment]:
        with self._store.lock:
            for a in self._active_rows():
                if a.user_id == user_id and a.role_id == role_id:
                    return detached(a)
            return None

    async def count_active_for_role(self, role_id: int) -> int:
        with self._store.lock:
            return sum(1 for a in self._active_rows() if a.role_id == role_id)

    async def count_active_by_role(self) -> dict[int, int]:
        with self._store.lock:
            counts: dict[int, int] = {}
            for a in self._active_rows():
                counts[a.role_id] = counts.get(a.role_id, 0) + 1
            return counts

    async def list_active_for_role(self, role_id: int) -> list[RoleAssignment]:
        with self._store.lock:
            rows = [a for a in self._active_rows() if a.role_id == role_id]
            rows.sort(key=lambda a: (a.assigned_at, a.id))
            return [detached(a) for a in rows]

    async def list_for_user_and_role(
        self, user_id: int, role_id: int
    ) -> list[RoleAssignment]:
        with self._store.lock:
            rows = [
                a
                for a in self._store.assignments.values()
                if a.user_id == user_id and a.role_id == role_id
            ]
            rows.sort(key=lambda a: (a.assigned_at, a.id), reverse=True)
            return [detached(a) for a in rows]

    async def list_active_role_names_for_user(self, user_id: int) -> list[str]:
        with self._store.lock:
            names = set()
            for a in self._active_rows():
                if a.user_id != user_id:
                    continue
                role = self._store.roles.get(a.role_id)
                if role is not None and role.is_active:
                    names.add(role.name)
            return sorted(names)

    async def delete_for_role(self, role_id: int) -> int:
        with self._store.lock:
            doomed = [key for key, a in self._store.assignments.items() if a.role_id == role_id]
            for key in doomed:
                previous = self._store.assignments.pop(key)
                self._journal.removed("assignments", key, previous)
            return len(doomed)
