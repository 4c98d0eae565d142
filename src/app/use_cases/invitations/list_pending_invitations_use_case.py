"""
List Pending Invitations Use Case
"""

from typing import List

from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import PendingInvitation


class ListPendingInvitationsUseCase:
    """
    Lists invitations that are neither consumed nor expired, newest first.
    Super admin only.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[PendingInvitation]]:
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.invitation, Operation.read
            )
            if allowed.is_err():
                return allowed

            rows = await self.uow.invitations.list_pending(utcnow())

            return Return.ok(
                [
                    PendingInvitation(
                        id=str(invitation.id),
                        email=invitation.email,
                        role=invitation.role.value,
                        organization_id=(
                            str(invitation.organization_id)
                            if invitation.organization_id
                            else None
                        ),
                        organization_name=organization_name or "No Organization",
                        expires_at=invitation.expires_at.isoformat(),
                        created_at=invitation.created_at.isoformat(),
                    )
                    for invitation, organization_name in rows
                ]
            )
