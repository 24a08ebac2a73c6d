"""Domain value objects."""

from authcore.domain.value_objects.duration import parse_duration
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.entity_state import EntityState
from authcore.domain.value_objects.password_hash import PasswordHash

__all__ = [
    "Email",
    "EntityState",
    "PasswordHash",
    "parse_duration",
]
