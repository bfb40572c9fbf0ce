# gamestore/domain/identity.py
from dataclasses import dataclass

from gamestore.utils.settings import ADMIN_ROLE


@dataclass(frozen=True)
class Identity:
    """Caller resolved by the identity provider for a single request."""

    user_id: int
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
