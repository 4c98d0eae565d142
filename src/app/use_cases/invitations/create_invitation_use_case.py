"""
Create Invitation Use Case

Issues a single-use invitation token for an email address.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, TypeAdapter, ValidationError

from config import ApplicationConfig
from src.app.services.policy import Entity, Operation, PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ASSIGNABLE_ROLES, AuditEvent, Invitation, OrganizationRole
from src.domain.errors import not_found, validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import CreateInvitationResponse

logger = logging.getLogger(__name__)

EMAIL_ADAPTER = TypeAdapter(EmailStr)


class CreateInvitationUseCase:
    """
    Use case for inviting a user by email.

    Business Rules:
    - Only the super admin can create invitations
    - Email must be a well-formed address; it is stored lower-cased
    - Role must be viewer, admin or owner (super_admin comes from bootstrap only)
    - Target organization, when given, must exist
    - Token is 32 random bytes, URL-safe encoded
    - Expires after INVITATION_TTL_DAYS (7 by default)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        email: str,
        role: str,
        organization_id: Optional[UUID] = None,
    ) -> Result[CreateInvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            principal: Caller (must be the super admin)
            email: Address the invitation is bound to
            role: Role granted on redemption
            organization_id: Organization joined on redemption, if any

        Returns:
            Result with CreateInvitationResponse DTO, or Error
        """
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.authorize(
                principal.user_id, Entity.invitation, Operation.create
            )
            if allowed.is_err():
                return allowed

            try:
                email = EMAIL_ADAPTER.validate_python((email or "").strip())
            except ValidationError:
                return Return.err(validation_error("Invalid email format"))

            try:
                invitation_role = OrganizationRole(role)
            except ValueError:
                invitation_role = None
            if invitation_role not in ASSIGNABLE_ROLES:
                return Return.err(
                    validation_error(
                        f"Invalid role: {role}. Must be one of: viewer, admin, owner"
                    )
                )

            if organization_id is not None:
                organization = await self.uow.organizations.get_by_id(organization_id)
                if organization is None:
                    return Return.err(not_found("Organization not found"))

            invitation = Invitation(
                email=email.lower(),
                token=secrets.token_urlsafe(32),
                role=invitation_role,
                organization_id=organization_id,
                invited_by=principal.user_id,
                expires_at=utcnow() + timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
            )
            await self.uow.invitations.create(invitation)

            await self.uow.audit_events.create(
                AuditEvent(
                    organization_id=organization_id,
                    user_id=principal.user_id,
                    action="invitation_created",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "invited_email": invitation.email,
                        "role": invitation_role.value,
                    },
                )
            )

            await self.uow.commit()

            logger.info(
                "Invitation %s issued for %s as %s",
                invitation.id,
                invitation.email,
                invitation_role.value,
            )

            return Return.ok(
                CreateInvitationResponse(
                    invitation_id=str(invitation.id),
                    email=invitation.email,
                    role=invitation_role.value,
                    organization_id=str(organization_id) if organization_id else None,
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
