"""
Audit Use Case DTOs (Data Transfer Objects)
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import AuditEvent


class AuditEventInfo(BaseModel):
    """Single audit event in response"""

    id: str
    action: str
    organization_id: Optional[str]
    user_id: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "AuditEventInfo":
        return cls(
            id=str(event.id),
            action=event.action,
            organization_id=str(event.organization_id) if event.organization_id else None,
            user_id=str(event.user_id) if event.user_id else None,
            timestamp=event.created_at.isoformat() + "Z",
            metadata=event.event_metadata or {},
        )


class AuditEventsPage(BaseModel):
    events: List[AuditEventInfo]
    next_cursor: Optional[str]
