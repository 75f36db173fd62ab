from fastapi import APIRouter, Depends

from scaffold.api.deps import get_current_principal, require_authorities
from scaffold.schemas.principal import Principal

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Principal)
def get_current_principal_info(principal: Principal = Depends(get_current_principal)):
    """Get the current authenticated principal."""
    return principal


@router.get("/admin", response_model=Principal)
def get_admin_principal_info(principal: Principal = Depends(require_authorities("admin"))):
    """Same as /me, restricted to principals holding the "admin" authority."""
    return principal
