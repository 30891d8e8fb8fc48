from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class Principal(BaseModel):
    """An already-authenticated caller, as forwarded by the auth layer."""

    principal_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
