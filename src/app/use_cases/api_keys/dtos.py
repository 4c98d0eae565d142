"""
API Key Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import ApiKey


class ApiKeyInfo(BaseModel):
    """API key metadata; never carries the key material"""

    id: str
    organization_id: str
    name: str
    key_prefix: str
    created_at: str
    revoked_at: Optional[str]
    last_used_at: Optional[str]

    @classmethod
    def from_entity(cls, api_key: ApiKey) -> "ApiKeyInfo":
        return cls(
            id=str(api_key.id),
            organization_id=str(api_key.organization_id),
            name=api_key.name,
            key_prefix=api_key.key_prefix,
            created_at=api_key.created_at.isoformat(),
            revoked_at=api_key.revoked_at.isoformat() if api_key.revoked_at else None,
            last_used_at=(
                api_key.last_used_at.isoformat() if api_key.last_used_at else None
            ),
        )


class CreateApiKeyResponse(ApiKeyInfo):
    """Returned once on creation; ``key`` is not stored"""

    key: str
