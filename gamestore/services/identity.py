"""
Identity providers.

A provider turns the raw `Authorization` header into an `Identity` or None.
None means "no usable credentials"; cart endpoints answer 401 for it and
privileged endpoints 403.

- `StubIdentityProvider` is the development placeholder: every request is the
  fixed admin user, whatever the header says.
- `JwtIdentityProvider` verifies `Bearer <token>` (PyJWT) and reads the
  `sub` and `rol` claims.
"""

from __future__ import annotations

import time
from functools import lru_cache

import jwt

from gamestore.domain.errors import Forbidden
from gamestore.domain.identity import Identity
from gamestore.utils import settings
from gamestore.utils.logging import get_logger

logger = get_logger(__name__)


class IdentityProvider:
    def resolve(self, authorization: str | None) -> Identity | None:
        raise NotImplementedError


class StubIdentityProvider(IdentityProvider):
    def __init__(self, user_id: int = settings.STUB_USER_ID, role: str = settings.ADMIN_ROLE):
        self.identity = Identity(user_id=user_id, role=role)

    def resolve(self, authorization: str | None) -> Identity | None:
        return self.identity


def _extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None
    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token


class JwtIdentityProvider(IdentityProvider):
    def __init__(self, secret: str = settings.JWT_SECRET, algorithm: str = settings.JWT_ALG):
        self.secret = secret
        self.algorithm = algorithm

    def resolve(self, authorization: str | None) -> Identity | None:
        token = _extract_bearer_token(authorization)
        if token is None:
            return None

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            logger.info(f"Rejected access token: {exc}")
            return None

        subject = str(payload.get("sub") or "").strip()
        if not subject.isdigit():
            logger.info("Rejected access token: non-numeric subject")
            return None

        return Identity(user_id=int(subject), role=str(payload.get("rol") or ""))


def build_access_token(
    *,
    user_id: int,
    role: str,
    secret: str = settings.JWT_SECRET,
    algorithm: str = settings.JWT_ALG,
    expires_in_s: int = 15 * 60,
) -> str:
    issued_at = int(time.time())
    payload = {
        "sub": str(user_id),
        "rol": role,
        "iat": issued_at,
        "exp": issued_at + expires_in_s,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


@lru_cache(maxsize=1)
def get_identity_provider() -> IdentityProvider:
    if settings.AUTH_MODE == "jwt":
        logger.info("Identity provider: JWT bearer tokens")
        return JwtIdentityProvider()
    if settings.AUTH_MODE != "stub":
        raise RuntimeError(f"Unknown AUTH_MODE {settings.AUTH_MODE!r}, expected 'stub' or 'jwt'.")
    logger.warning("Identity provider: STUB, every request runs as the fixed admin user")
    return StubIdentityProvider()


def require_admin(identity: Identity | None) -> Identity:
    if identity is None or not identity.is_admin:
        raise Forbidden()
    return identity
