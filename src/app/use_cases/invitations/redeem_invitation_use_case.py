"""
Redeem Invitation Use Case

Handles the identity provider's "principal created" event: consumes the
newest pending invitation for the new user's email and creates the
profile and membership it grants.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from src.app.services.public_organization import get_or_create_public_organization
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    AuditEvent,
    Invitation,
    Membership,
    OrganizationRole,
    Profile,
)
from src.domain.errors import conflict
from src.libs.result import Result, Return

from .dtos import PrincipalCreatedEvent, RedeemInvitationResponse

logger = logging.getLogger(__name__)


class RedeemInvitationUseCase:
    """
    Use case run once per new principal.

    Trusted operation: it bypasses the policy engine because the caller is
    the identity provider, not a principal. It preserves:
    - an invitation is consumed at most once (conditional claim on used_at)
    - a new principal gets at most one membership from the event

    Business Rules:
    - Newest pending invitation for the email wins; older ones stay pending
    - Invitation with an organization -> membership with the invited role
    - super_admin invitation without organization -> super_admin membership
      in the canonical public organization (created when absent)
    - No invitation -> viewer of the canonical public organization, if any
    - A super_admin grant while another super admin exists is refused; the
      principal is treated as having no invitation
    - Replayed events for an existing profile change nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event: PrincipalCreatedEvent) -> Result[RedeemInvitationResponse]:
        """
        Execute redemption for a principal-created event.

        Args:
            event: user id, email and optional display name of the new principal

        Returns:
            Result with RedeemInvitationResponse DTO, or CONFLICT Error
        """
        async with self.uow:
            existing = await self.uow.profiles.get_by_id(event.user_id)
            if existing is not None:
                return Return.ok(
                    RedeemInvitationResponse(
                        user_id=str(event.user_id), already_processed=True
                    )
                )

            email = event.email.strip().lower()
            now = utcnow()

            invitation = await self._claim_invitation(email, now)

            await self.uow.profiles.create(
                Profile(
                    id=event.user_id,
                    email=email,
                    display_name=event.display_name or event.email,
                )
            )

            organization_id = None
            role: Optional[OrganizationRole] = None
            refused_role: Optional[OrganizationRole] = None
            if invitation is not None and await self._super_admin_taken(invitation):
                logger.warning(
                    "Invitation %s would grant a second super admin to %s; grant refused",
                    invitation.id,
                    event.user_id,
                )
                refused_role = invitation.role

            if invitation is not None and refused_role is None:
                if invitation.organization_id is not None:
                    organization_id = invitation.organization_id
                    role = invitation.role
                elif invitation.role == OrganizationRole.super_admin:
                    public_org = await get_or_create_public_organization(self.uow)
                    organization_id = public_org.id
                    role = OrganizationRole.super_admin
            else:
                public_org = await self.uow.organizations.get_public()
                if public_org is not None:
                    organization_id = public_org.id
                    role = OrganizationRole.viewer

            if organization_id is not None:
                try:
                    await self.uow.memberships.create(
                        Membership(
                            organization_id=organization_id,
                            user_id=event.user_id,
                            role=role,
                        )
                    )
                except IntegrityError:
                    logger.warning(
                        "Membership for %s in %s rejected by uniqueness constraint",
                        event.user_id,
                        organization_id,
                    )
                    return Return.err(
                        conflict("Membership could not be created: role already assigned")
                    )

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    user_id=event.user_id,
                    action="invitation_redeemed" if invitation else "self_signup",
                    event_metadata={
                        "invitation_id": str(invitation.id) if invitation else None,
                        "role": role.value if role else None,
                        "refused_role": refused_role.value if refused_role else None,
                    },
                )
            )

            await self.uow.commit()

            logger.info(
                "Principal %s joined %s as %s (invitation=%s)",
                event.user_id,
                organization_id,
                role.value if role else None,
                invitation.id if invitation else None,
            )

            return Return.ok(
                RedeemInvitationResponse(
                    user_id=str(event.user_id),
                    invitation_id=str(invitation.id) if invitation else None,
                    organization_id=str(organization_id) if organization_id else None,
                    role=role.value if role else None,
                )
            )

    async def _super_admin_taken(self, invitation: Invitation) -> bool:
        if invitation.role != OrganizationRole.super_admin:
            return False
        return await self.uow.memberships.any_with_role(OrganizationRole.super_admin)

    async def _claim_invitation(self, email: str, now) -> Optional[Invitation]:
        # A candidate claimed concurrently by another redemption falls through
        # to the next newest one.
        for candidate in await self.uow.invitations.list_redeemable_by_email(email, now):
            if await self.uow.invitations.mark_used(candidate.id, now):
                return candidate
        return None
