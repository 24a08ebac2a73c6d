"""Assign or revoke a role use case."""

import logging

from authcore.application.clock import Clock, utc_now
from authcore.application.dto.role_dto import (
    AssignmentAction,
    AssignmentOutput,
    AssignmentResultOutput,
    SetAssignmentInput,
)
from authcore.application.exceptions import ConflictError, NotFoundError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.use_cases.error_guard import guard_errors
from authcore.application.use_cases.roles.lookups import get_role_or_raise, get_user_or_raise
from authcore.domain.entities.role_assignment import RoleAssignment

logger = logging.getLogger(__name__)


class SetRoleAssignmentUseCase:
    """
    Use case for granting or revoking a role.

    Granting inserts a new active assignment; revoking transitions the
    active one to inactive. Rows are never reactivated, so the rows of a
    (user, role) pair form its grant/revoke history.
    """

    def __init__(self, uow: UnitOfWorkPort, clock: Clock = utc_now):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            clock: Source of the current UTC time
        """
        self.uow = uow
        self.clock = clock

    @guard_errors()
    async def execute(
        self, role_id: int, input_dto: SetAssignmentInput
    ) -> AssignmentResultOutput:
        """
        Apply an assign or revoke action.

        Args:
            role_id: Role being granted or revoked
            input_dto: Target user and action

        Returns:
            Message and the affected assignment

        Raises:
            NotFoundError: If the role or user doesn't exist, or on revoke
                when the user holds no active assignment of the role
            ConflictError: On assign when an active assignment already exists
        """
        user_id = int(input_dto.user_id)

        async with self.uow:
            role = await get_role_or_raise(self.uow, role_id)
            user = await get_user_or_raise(self.uow, user_id)
            active = await self.uow.assignments.get_active(user_id, role_id)
            now = self.clock()

            if input_dto.action is AssignmentAction.ASSIGN:
                if active is not None:
                    raise ConflictError(
                        message="User already has this role assigned",
                        resource_type="RoleAssignment",
                    )
                assignment = await self.uow.assignments.add(
                    RoleAssignment.grant(user_id, role_id, now)
                )
                message = "Role assigned"
            else:
                if active is None:
                    raise NotFoundError(
                        message="User does not hold this role",
                        resource_type="RoleAssignment",
                    )
                active.revoke(now)
                assignment = await self.uow.assignments.update(active)
                message = "Role revoked"

        logger.info(
            message,
            extra={"role_id": role_id, "user_id": user_id, "assignment_id": assignment.id},
        )
        return AssignmentResultOutput(
            message=message,
            assignment=AssignmentOutput.from_entity(assignment, user=user, role=role),
        )
