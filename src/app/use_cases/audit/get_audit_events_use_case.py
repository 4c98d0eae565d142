"""
Get Audit Events Use Case

Retrieves the audit trail with keyset pagination.
"""

import base64
import binascii
from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID

from src.app.services.policy import PolicyEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.errors import validation_error
from src.domain.principal import Principal
from src.libs.result import Result, Return

from .dtos import AuditEventInfo, AuditEventsPage


def encode_cursor(event: AuditEvent) -> str:
    """Opaque cursor pointing just past ``event`` in (created_at, id) order"""
    raw = f"{event.created_at.isoformat()}|{event.id.hex}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> Tuple[datetime, UUID]:
    """
    Raises:
        ValueError: cursor was not produced by encode_cursor
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise ValueError("cursor is not base64") from e
    created_at, _, event_id = raw.partition("|")
    return datetime.fromisoformat(created_at), UUID(hex=event_id)


class GetAuditEventsUseCase:
    """
    Use case for reading the audit trail.

    Business Rules:
    - Super admin only
    - Results ordered by newest first, ties broken by event id
    - Optional filters: organization, action
    - A malformed cursor is a VALIDATION_ERROR
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        limit: int = 50,
        cursor: Optional[str] = None,
        organization_id: Optional[UUID] = None,
        action: Optional[str] = None,
    ) -> Result[AuditEventsPage]:
        """
        Execute get audit events use case.

        Args:
            principal: Caller (must be the super admin)
            limit: Maximum number of events to return
            cursor: next_cursor of the previous page (optional)
            organization_id: Only events of this organization (optional)
            action: Only events with this action (optional)

        Returns:
            Result with AuditEventsPage DTO, or Error
        """
        async with self.uow:
            policy = PolicyEngine.for_uow(self.uow)
            allowed = await policy.require_super_admin(
                principal.user_id, "view audit events"
            )
            if allowed.is_err():
                return allowed

            before = None
            if cursor:
                try:
                    before = decode_cursor(cursor)
                except ValueError:
                    return Return.err(validation_error("Invalid pagination cursor"))

            # One extra row tells whether another page exists
            events = await self.uow.audit_events.list_page(
                limit + 1,
                organization_id=organization_id,
                action=action,
                before=before,
            )
            has_more = len(events) > limit
            events = events[:limit]

            return Return.ok(
                AuditEventsPage(
                    events=[AuditEventInfo.from_entity(event) for event in events],
                    next_cursor=encode_cursor(events[-1]) if has_more else None,
                )
            )
