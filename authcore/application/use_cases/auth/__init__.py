"""Authentication use cases."""

from authcore.application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from authcore.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from authcore.application.use_cases.auth.register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "GetCurrentUserUseCase",
    "RegisterUserUseCase",
]
