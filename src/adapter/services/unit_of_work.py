from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.api_key_repository import ApiKeyRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.profile_repository import ProfileRepository
from src.adapter.repositories.prompt_argument_repository import PromptArgumentRepository
from src.adapter.repositories.prompt_repository import PromptRepository
from src.adapter.repositories.prompt_variant_repository import PromptVariantRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.organizations = OrganizationRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.prompts = PromptRepository(self.session)
        self.prompt_variants = PromptVariantRepository(self.session)
        self.prompt_arguments = PromptArgumentRepository(self.session)
        self.api_keys = ApiKeyRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
