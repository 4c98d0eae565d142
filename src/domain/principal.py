from uuid import UUID

from pydantic import BaseModel


class Principal(BaseModel):
    """Authenticated identity supplied by the identity provider"""

    user_id: UUID
    email: str
