from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from scaffold.core.security import decode_token
from scaffold.errors import AccessDeniedError, InsufficientAuthenticationError
from scaffold.schemas.principal import Principal

# A missing token is reported as InsufficientAuthenticationError, not HTTPException.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    """Get the current authenticated principal from a JWT access token."""
    if credentials is None:
        raise InsufficientAuthenticationError()

    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise InsufficientAuthenticationError("Could not validate credentials")

    subject = payload.get("sub")
    if subject is None:
        raise InsufficientAuthenticationError("Could not validate credentials")

    return Principal(subject=str(subject), authorities=list(payload.get("authorities", [])))


def require_authorities(*authority_names: str):
    """
    Create a dependency that requires the current principal to hold one of the given authorities.

    Example:
        Depends(require_authorities("admin"))
        Depends(require_authorities("admin", "accountant"))
    """

    def authority_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not set(principal.authorities) & set(authority_names):
            raise AccessDeniedError()
        return principal

    return authority_checker
