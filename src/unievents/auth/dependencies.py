"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers to build the auth
components from settings and to extract the current identity from the
bearer token. Settings come through get_settings so tests can swap in
their own admin account and signing secret.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.credentials import AuthService, CredentialVerifier
from unievents.auth.identity import Identity
from unievents.auth.jwt import TokenIssuer
from unievents.config import Settings, get_settings
from unievents.db.engine import get_db
from unievents.errors import Unauthenticated


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    verifier = CredentialVerifier(db, admin=settings.admin_account())
    return AuthService(verifier, issuer)


async def get_current_identity_optional(
    authorization: Optional[str] = Header(None),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Optional[Identity]:
    """Extract current identity (optional — returns None if no auth).

    A header that is present but carries a bad token still fails with 401.
    """
    if authorization and authorization.startswith("Bearer "):
        return issuer.authenticate(authorization[7:])
    return None


async def get_current_identity(
    identity: Optional[Identity] = Depends(get_current_identity_optional),
) -> Identity:
    """Extract current identity (required — 401 if no auth)."""
    if identity is None:
        raise Unauthenticated()
    return identity
