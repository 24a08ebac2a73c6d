"""Authentication DTOs (Data Transfer Objects)."""

import re
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

PASSWORD_COMPLEXITY = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])")
PERSON_NAME = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑüÜ\s]+$")
PHONE_NUMBER = re.compile(r"^\+?[1-9]\d{1,14}$")
NATIONAL_ID = re.compile(r"^[a-zA-Z0-9]+$")


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class RegisterUserInput(BaseModel):
    """Input DTO for user registration."""

    email: EmailStr = Field(..., max_length=255, description="User's email address")
    password: str = Field(
        ..., min_length=8, max_length=128, description="User's password"
    )
    first_name: str = Field(
        ..., alias="firstName", min_length=2, max_length=100, description="Given names"
    )
    last_name: str = Field(
        ..., alias="lastName", min_length=2, max_length=100, description="Family names"
    )
    phone: Optional[str] = Field(
        None, alias="telefono", max_length=20, description="Phone number"
    )
    national_id: Optional[str] = Field(
        None, alias="dni", max_length=20, description="National identity document"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def validate_password_complexity(cls, value: str) -> str:
        if not PASSWORD_COMPLEXITY.match(value):
            raise ValueError(
                "Password must contain at least one lowercase letter, one uppercase "
                "letter, one digit and one symbol (@$!%*?&)"
            )
        return value

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def collapse_whitespace(cls, value):
        if isinstance(value, str):
            return " ".join(value.split())
        return value

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_person_name(cls, value: str) -> str:
        if not PERSON_NAME.match(value):
            raise ValueError("Name may only contain letters and spaces")
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not PHONE_NUMBER.match(value):
            raise ValueError("Phone must be in international format (e.g. +51987654321)")
        return value

    @field_validator("national_id")
    @classmethod
    def validate_national_id(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not NATIONAL_ID.match(value):
            raise ValueError("National id may only contain letters and digits")
        return value


class LoginInput(BaseModel):
    """Input DTO for user login."""

    email: EmailStr = Field(..., max_length=255, description="User's email address")
    password: str = Field(..., min_length=1, max_length=128, description="User's password")

    model_config = {"frozen": True}

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class UserPublicOutput(BaseModel):
    """Public projection of a user, as embedded in auth responses."""

    id: str = Field(..., description="User id as a decimal string")
    email: str = Field(..., description="User's email address")
    name: str = Field(..., alias="nombre", description="Display name")
    roles: list[str] = Field(default_factory=list, description="Active role names")
    email_verified: bool = Field(
        ..., alias="emailVerificado", description="Whether the email was verified"
    )
    is_active: bool = Field(
        ..., alias="activo", description="Whether the account is active"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_entity(cls, user: "User", roles: list[str]) -> "UserPublicOutput":
        """
        Create DTO from User entity.

        Args:
            user: User domain entity
            roles: Names of the user's active roles

        Returns:
            UserPublicOutput DTO
        """
        return cls(
            id=str(user.id),
            email=user.email.value,
            name=user.name,
            roles=list(roles),
            email_verified=user.email_verified,
            is_active=user.is_active,
        )


class AuthResponseOutput(BaseModel):
    """Output DTO for a successful registration or login."""

    access_token: str = Field(..., description="Signed session token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserPublicOutput = Field(..., description="Authenticated user")

    model_config = {"frozen": True}


# Import for type hints
from authcore.domain.entities.user import User  # noqa: E402

UserPublicOutput.model_rebuild()
