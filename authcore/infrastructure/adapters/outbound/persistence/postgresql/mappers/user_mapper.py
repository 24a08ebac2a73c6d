"""
Mapper between User domain entity and UserModel database model.

- to_entity(): Convert SQLAlchemy model → Domain entity
- to_model(): Convert Domain entity → SQLAlchemy model

This is the only place where user entity ↔ model conversion happens.
"""

from typing import Optional

from authcore.domain.entities.user import User
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.user_model import (
    UserModel,
)


class UserMapper:
    """
    Mapper between User entity and UserModel.

    Handles conversion between:
    - Pure domain entity (User) with value objects
    - SQLAlchemy ORM model (UserModel) with primitives
    """

    @staticmethod
    def to_entity(model: UserModel) -> User:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: UserModel from database

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            email=Email(model.email),
            name=model.name,
            password_hash=PasswordHash(model.password_hash),
            is_active=model.is_active,
            email_verified=model.email_verified,
            failed_login_attempts=model.failed_login_attempts,
            locked_until=model.locked_until,
            last_login_at=model.last_login_at,
            phone=model.phone,
            national_id=model.national_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_model(entity: User, existing_model: Optional[UserModel] = None) -> UserModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: User domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            UserModel for database persistence
        """
        model = existing_model if existing_model is not None else UserModel()

        model.email = entity.email.value
        model.name = entity.name
        model.password_hash = entity.password_hash.value
        model.is_active = entity.is_active
        model.email_verified = entity.email_verified
        model.failed_login_attempts = entity.failed_login_attempts
        model.locked_until = entity.locked_until
        model.last_login_at = entity.last_login_at
        model.phone = entity.phone
        model.national_id = entity.national_id

        # Leave unset timestamps to the column defaults
        if entity.created_at is not None and existing_model is None:
            model.created_at = entity.created_at
        if entity.updated_at is not None:
            model.updated_at = entity.updated_at

        return model
