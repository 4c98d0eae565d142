from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def list_page(
        self,
        limit: int,
        organization_id: Optional[UUID] = None,
        action: Optional[str] = None,
        before: Optional[Tuple[datetime, UUID]] = None,
    ) -> List[AuditEvent]:
        """Keyset page over (created_at, id), newest first"""
        stmt = select(AuditEvent)

        if organization_id is not None:
            stmt = stmt.where(AuditEvent.organization_id == organization_id)
        if action is not None:
            stmt = stmt.where(AuditEvent.action == action)

        if before is not None:
            created_at, event_id = before
            stmt = stmt.where(
                or_(
                    AuditEvent.created_at < created_at,
                    and_(AuditEvent.created_at == created_at, AuditEvent.id < event_id),
                )
            )

        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(limit)

        result = await self.session.exec(stmt)
        return list(result.all())
