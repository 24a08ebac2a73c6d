"""
Thread-safe in-memory credential store.

For tests and local development. NOT FOR PRODUCTION: data is lost on
process restart.
"""

import copy
import itertools
from threading import RLock
from typing import Callable

from authcore.domain.entities.role import Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.domain.entities.user import User

UndoAction = Callable[[], None]


class InMemoryStore:
    """
    Tables of users, roles and assignments keyed by id.

    Every read and write of the tables happens under ``lock``. Repositories
    hand out copies, so an entity mutated by a caller only reaches the store
    through an explicit ``update``.
    """

    def __init__(self) -> None:
        self.lock = RLock()
        self.users: dict[int, User] = {}
        self.roles: dict[int, Role] = {}
        self.assignments: dict[int, RoleAssignment] = {}
        self._sequences = {
            "users": itertools.count(1),
            "roles": itertools.count(1),
            "assignments": itertools.count(1),
        }

    def next_id(self, table: str) -> int:
        return next(self._sequences[table])

    def table(self, name: str) -> dict:
        return getattr(self, name)

    def clear(self) -> None:
        with self.lock:
            self.users.clear()
            self.roles.clear()
            self.assignments.clear()


class Journal:
    """
    Undo log of one unit of work.

    Each write records how to reverse itself; a rollback replays the log
    newest first.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._undo: list[UndoAction] = []

    def inserted(self, table: str, key: int) -> None:
        rows = self._store.table(table)
        self._undo.append(lambda: rows.pop(key, None))

    def replaced(self, table: str, key: int, previous) -> None:
        rows = self._store.table(table)

        def restore() -> None:
            rows[key] = previous

        self._undo.append(restore)

    def removed(self, table: str, key: int, previous) -> None:
        self.replaced(table, key, previous)

    def clear(self) -> None:
        self._undo.clear()

    def rollback(self) -> None:
        with self._store.lock:
            while self._undo:
                self._undo.pop()()


def detached(entity):
    """Copy of an entity safe to hand to callers."""
    return copy.deepcopy(entity)
