"""
API Key Use Cases
"""

from .create_api_key_use_case import (
    API_KEY_PREFIX,
    KEY_PREFIX_LENGTH,
    CreateApiKeyUseCase,
    hash_api_key,
    verify_api_key,
)
from .dtos import ApiKeyInfo, CreateApiKeyResponse
from .list_api_keys_use_case import ListApiKeysUseCase
from .revoke_api_key_use_case import RevokeApiKeyUseCase

__all__ = [
    "CreateApiKeyUseCase",
    "ListApiKeysUseCase",
    "RevokeApiKeyUseCase",
    "ApiKeyInfo",
    "CreateApiKeyResponse",
    "API_KEY_PREFIX",
    "KEY_PREFIX_LENGTH",
    "hash_api_key",
    "verify_api_key",
]
