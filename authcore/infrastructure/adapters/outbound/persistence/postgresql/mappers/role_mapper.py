"""Mappers between role entities and their database models."""

from typing import Optional

from authcore.domain.entities.role import Role
from authcore.domain.entities.role_assignment import RoleAssignment
from authcore.infrastructure.adapters.outbound.persistence.postgresql.models.role_model import (
    RoleAssignmentModel,
    RoleModel,
)


class RoleMapper:
    """Mapper between Role entity and RoleModel."""

    @staticmethod
    def to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            description=model.description,
            state=model.state,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_model(entity: Role, existing_model: Optional[RoleModel] = None) -> RoleModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: Role domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            RoleModel for database persistence
        """
        model = existing_model if existing_model is not None else RoleModel()

        model.name = entity.name
        model.description = entity.description
        model.state = entity.state

        if entity.created_at is not None and existing_model is None:
            model.created_at = entity.created_at
        if entity.updated_at is not None:
            model.updated_at = entity.updated_at

        return model


class RoleAssignmentMapper:
    """Mapper between RoleAssignment entity and RoleAssignmentModel."""

    @staticmethod
    def to_entity(model: RoleAssignmentModel) -> RoleAssignment:
        return RoleAssignment(
            id=model.id,
            user_id=model.user_id,
            role_id=model.role_id,
            state=model.state,
            assigned_at=model.assigned_at,
            revoked_at=model.revoked_at,
        )

    @staticmethod
    def to_model(
        entity: RoleAssignment,
        existing_model: Optional[RoleAssignmentModel] = None,
    ) -> RoleAssignmentModel:
        if existing_model is not None:
            # Only the state transition is mutable
            existing_model.state = entity.state
            existing_model.revoked_at = entity.revoked_at
            return existing_model

        model = RoleAssignmentModel(
            user_id=entity.user_id,
            role_id=entity.role_id,
            state=entity.state,
            revoked_at=entity.revoked_at,
        )
        if entity.assigned_at is not None:
            model.assigned_at = entity.assigned_at
        return model
