"""
Audit Use Cases

All audit-related business logic.
"""

from .dtos import AuditEventInfo, AuditEventsPage
from .get_audit_events_use_case import GetAuditEventsUseCase, decode_cursor, encode_cursor

__all__ = [
    "GetAuditEventsUseCase",
    "AuditEventInfo",
    "AuditEventsPage",
    "encode_cursor",
    "decode_cursor",
]
