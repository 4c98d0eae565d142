"""
Revoke Invitation Use Case

Soft-revokes a pending invitation by back-dating its expiry.
"""

import logging
from datetime import timedelta
from uuid import UUID

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import RevokeInvitationResponse

logger = logging.getLogger(__name__)


class RevokeInvitationUseCase:
    """
    Use case for revoking invitations.

    Business Rules:
    - Only the super admin can revoke
    - Only pending invitations change; expired, consumed or unknown
      invitations report revoked=False and nothing is written
    - The row is kept for auditing, expires_at is set one day in the past
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, invitation_id: UUID
    ) -> Result[RevokeInvitationResponse]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.invitation, Operation.update
            )
            if allowed.is_err():
                return allowed

            now = utcnow()
            revoked = await self.uow.invitations.expire(
                invitation_id, now, now - timedelta(days=1)
            )
            if not revoked:
                return Return.ok(RevokeInvitationResponse(revoked=False))

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=principal.user_id,
                    action="invitation_revoked",
                    event_metadata={"invitation_id": str(invitation_id)},
                )
            )
            await self.uow.commit()

            logger.info("Invitation %s revoked", invitation_id)
            return Return.ok(RevokeInvitationResponse(revoked=True))
