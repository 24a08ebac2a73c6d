"""User administration use cases."""

from authcore.application.use_cases.users.set_user_active_state import (
    SetUserActiveStateUseCase,
)

__all__ = [
    "SetUserActiveStateUseCase",
]
