from typing import Annotated

from fastapi import APIRouter, Depends

from domain.value_objects.principal import Principal
from interfaces.api.auth import get_principal

router = APIRouter(prefix="/api", tags=["auth"])


@router.get("/auth")
async def check_auth(principal: Annotated[Principal, Depends(get_principal)]) -> dict[str, str]:
    """Echo the principal forwarded by the auth layer."""
    return {
        "message": "Authorized",
        "principal_id": principal.principal_id,
        "user_type": principal.role.value,
    }
