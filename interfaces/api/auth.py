"""Principal resolution for routes.

Authentication happens upstream; the gateway forwards the authenticated
principal in ``X-Principal-Id`` and ``X-Principal-Role``.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from domain.value_objects.principal import Principal, Role


def get_principal(
    x_principal_id: Annotated[str | None, Header()] = None,
    x_principal_role: Annotated[str | None, Header()] = None,
) -> Principal:
    if not x_principal_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    try:
        role = Role((x_principal_role or Role.USER.value).lower())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown principal role",
        ) from None
    return Principal(principal_id=x_principal_id, role=role)


def require_admin(principal: Annotated[Principal, Depends(get_principal)]) -> Principal:
    if not principal.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return principal
