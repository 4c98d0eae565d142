"""
Error taxonomy shared by all use cases.

The API layer maps each code to an HTTP status; anything outside this set
is treated as a server error.
"""

from enum import Enum

from src.libs.result import Error


class ErrorCode(str, Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


def permission_denied(message: str) -> Error:
    return Error(ErrorCode.PERMISSION_DENIED.value, message)


def validation_error(message: str) -> Error:
    return Error(ErrorCode.VALIDATION_ERROR.value, message)


def not_found(message: str) -> Error:
    return Error(ErrorCode.NOT_FOUND.value, message)


def conflict(message: str) -> Error:
    return Error(ErrorCode.CONFLICT.value, message)
