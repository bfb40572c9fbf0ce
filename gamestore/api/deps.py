# gamestore/api/deps.py
from fastapi import Depends, Header

from gamestore.domain.errors import Unauthorized
from gamestore.domain.identity import Identity
from gamestore.services.identity import IdentityProvider, get_identity_provider, require_admin


def get_identity(
    authorization: str | None = Header(default=None),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity | None:
    return provider.resolve(authorization)


def require_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
    # resolved before path/body validation, so 401 wins over 400
    if identity is None:
        raise Unauthorized()
    return identity


def require_admin_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
    return require_admin(identity)
