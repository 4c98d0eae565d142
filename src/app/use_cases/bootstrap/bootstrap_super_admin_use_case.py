"""
Bootstrap Super Admin Use Case

Seeds the one invitation allowed to grant super_admin.
"""

import logging
from datetime import timedelta

from pydantic import BaseModel

from config import ApplicationConfig
from src.app.services.public_organization import get_or_create_public_organization
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, Invitation, OrganizationRole
from src.domain.errors import validation_error
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class BootstrapSuperAdminResponse(BaseModel):
    """Response DTO for BootstrapSuperAdminUseCase"""

    invitation_id: str
    email: str
    expires_at: str
    created: bool
    public_organization_id: str


class BootstrapSuperAdminUseCase:
    """
    Upsert the super admin invitation, keyed by the bootstrap token.

    Trusted operation: runs without a caller and bypasses the rule that only
    the super admin creates invitations, because no super admin exists at
    first deployment. It preserves:
    - exactly one invitation row carries the bootstrap token
    - that row is the only super_admin invitation ever issued

    Idempotent: re-running re-extends expiry by BOOTSTRAP_INVITATION_TTL_DAYS.
    A consumed bootstrap invitation is left untouched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[BootstrapSuperAdminResponse]:
        email = (email or "").strip().lower()
        if not email:
            return Return.err(validation_error("Super admin email is not configured"))

        async with self.uow:
            public_org = await get_or_create_public_organization(self.uow)

            expires_at = utcnow() + timedelta(
                days=ApplicationConfig.BOOTSTRAP_INVITATION_TTL_DAYS
            )
            invitation = await self.uow.invitations.get_by_token(
                ApplicationConfig.BOOTSTRAP_TOKEN
            )
            created = invitation is None

            if created:
                invitation = await self.uow.invitations.create(
                    Invitation(
                        email=email,
                        token=ApplicationConfig.BOOTSTRAP_TOKEN,
                        role=OrganizationRole.super_admin,
                        expires_at=expires_at,
                    )
                )
            elif invitation.used_at is None:
                invitation.expires_at = expires_at
                invitation = await self.uow.invitations.update(invitation)

            await self.uow.audit_events.create(
                AuditEvent(
                    action="bootstrap_invitation_seeded",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "email": invitation.email,
                        "created": created,
                    },
                )
            )
            await self.uow.commit()

            logger.info(
                "Bootstrap invitation %s for %s %s",
                invitation.id,
                invitation.email,
                "created" if created else "refreshed",
            )

            return Return.ok(
                BootstrapSuperAdminResponse(
                    invitation_id=str(invitation.id),
                    email=invitation.email,
                    expires_at=invitation.expires_at.isoformat(),
                    created=created,
                    public_organization_id=str(public_org.id),
                )
            )
