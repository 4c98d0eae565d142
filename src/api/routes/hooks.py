"""
Identity Provider Hooks

Receives lifecycle notifications from the identity provider. Authentication
is a shared secret in the X-Webhook-Secret header, not a user JWT.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_webhook_secret
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    PrincipalCreatedEvent,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/hooks", tags=["Hooks"])


@router.post(
    "/principal-created",
    status_code=status.HTTP_200_OK,
    response_model=RedeemInvitationResponse,
    dependencies=[Depends(verify_webhook_secret)],
)
async def on_principal_created(
    event: PrincipalCreatedEvent,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Principal Created

    Called once per signup. Creates the profile and redeems the newest
    redeemable invitation for the email, or attaches the user to the public
    organization as viewer. Replays of the same event are no-ops.

    Raises:
        - 401 Unauthorized: Missing or invalid webhook secret
        - 409 Conflict: Membership could not be created
    """
    result = await RedeemInvitationUseCase(uow).execute(event)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
