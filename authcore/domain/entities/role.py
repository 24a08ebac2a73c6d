"""Role domain entity."""

from dataclasses import dataclass
from datetime import datetime

from authcore.domain.exceptions import InvalidRoleError
from authcore.domain.value_objects.entity_state import EntityState

MAX_ROLE_NAME_LENGTH = 50


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidRoleError("name cannot be empty")
    if len(name) > MAX_ROLE_NAME_LENGTH:
        raise InvalidRoleError(
            f"name cannot exceed {MAX_ROLE_NAME_LENGTH} characters"
        )
    return name


@dataclass
class Role:
    """
    Named permission group that can be granted to users.

    Names are compared case-sensitively. ``id`` is ``None`` until stored.
    """

    id: int | None
    name: str
    description: str | None = None
    state: EntityState = EntityState.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name)
        self.state = EntityState(self.state)

    @property
    def is_active(self) -> bool:
        return self.state is EntityState.ACTIVE

    def rename(self, new_name: str) -> None:
        self.name = _validate_name(new_name)

    def describe(self, description: str | None) -> None:
        self.description = description

    def set_state(self, state: EntityState) -> None:
        self.state = EntityState(state)

    def toggle_state(self) -> EntityState:
        """Flip active <-> inactive and return the new state."""
        self.state = self.state.toggled()
        return self.state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Role(id={self.id}, name={self.name!r}, state={self.state.value})"
