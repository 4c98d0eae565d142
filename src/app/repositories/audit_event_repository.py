from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def list_page(
        self,
        limit: int,
        organization_id: Optional[UUID] = None,
        action: Optional[str] = None,
        before: Optional[Tuple[datetime, UUID]] = None,
    ) -> List[AuditEvent]:
        """
        Get up to ``limit`` audit events, newest first.

        Events are ordered by (created_at, id) descending. ``before`` is the
        (created_at, id) of the last event already seen; only events after it
        in that order are returned, so events sharing a timestamp are neither
        skipped nor repeated across pages.
        """
        pass
