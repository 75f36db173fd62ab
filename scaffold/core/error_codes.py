"""Error code registry: symbolic keys bound to stable codes and messages."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class ErrorKey(str, Enum):
    VALIDATION = "validation"
    BAD_CREDENTIALS = "bad_credentials"
    LOCKED = "locked"
    DISABLED = "disabled"
    NO_AUTHORITY = "no_authority"
    AUTH_SERVICE = "auth_service"
    USER_NOT_FOUND = "user_not_found"
    SYSTEM = "system"


class ErrorCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ErrorCodeRegistry:
    """
    Read-only lookup from ErrorKey to ErrorCode.

    Every ErrorKey must be bound, so lookups never fail once the
    registry has been built.

    Raises:
        ValueError: If any ErrorKey is missing from ``entries``.
    """

    def __init__(self, entries: Mapping[ErrorKey, ErrorCode]):
        missing = [key.value for key in ErrorKey if key not in entries]
        if missing:
            raise ValueError(f"Error code registry is missing keys: {', '.join(missing)}")
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, key: ErrorKey) -> ErrorCode:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def override(self, **changes: ErrorCode) -> "ErrorCodeRegistry":
        """Return a new registry with some entries replaced, keyed by ErrorKey name."""
        entries = dict(self._entries)
        for name, error_code in changes.items():
            entries[ErrorKey[name.upper()]] = error_code
        return ErrorCodeRegistry(entries)


DEFAULT_ERROR_CODES = ErrorCodeRegistry(
    {
        ErrorKey.VALIDATION: ErrorCode(code="EX900000", message="Request parameters failed validation"),
        ErrorKey.BAD_CREDENTIALS: ErrorCode(code="EX000101", message="Incorrect username or password"),
        ErrorKey.LOCKED: ErrorCode(code="EX000103", message="Account is locked"),
        ErrorKey.DISABLED: ErrorCode(code="EX000104", message="Account is disabled"),
        ErrorKey.NO_AUTHORITY: ErrorCode(code="EX000105", message="Account has no authority"),
        ErrorKey.AUTH_SERVICE: ErrorCode(code="EX000106", message="Authentication service error"),
        ErrorKey.USER_NOT_FOUND: ErrorCode(code="EX000107", message="User does not exist"),
        ErrorKey.SYSTEM: ErrorCode(code="EX000001", message="Internal server error"),
    }
)
