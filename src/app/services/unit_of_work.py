from abc import ABC, abstractmethod

from src.app.repositories.api_key_repository import IApiKeyRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.profile_repository import IProfileRepository
from src.app.repositories.prompt_argument_repository import IPromptArgumentRepository
from src.app.repositories.prompt_repository import IPromptRepository
from src.app.repositories.prompt_variant_repository import IPromptVariantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    profiles: IProfileRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    prompts: IPromptRepository
    prompt_variants: IPromptVariantRepository
    prompt_arguments: IPromptArgumentRepository
    api_keys: IApiKeyRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
