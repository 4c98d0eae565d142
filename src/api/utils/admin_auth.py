"""
Service Credential Authentication

Validates the shared secrets used by operators and the identity provider.
These are service-to-service credentials, not user JWTs.
"""

from fastapi import Header, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.libs.result import Error


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Guards operator endpoints such as the bootstrap seeding.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if x_admin_api_key != ApplicationConfig.ADMIN_API_KEY:
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True


async def verify_webhook_secret(x_webhook_secret: str = Header(None)):
    """Verify the identity provider's X-Webhook-Secret header"""
    if not x_webhook_secret or x_webhook_secret != ApplicationConfig.IDENTITY_WEBHOOK_SECRET:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid webhook secret"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
