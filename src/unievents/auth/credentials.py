"""Credential verification and login.

Learn: Two places an email/password pair can be checked against, in order:
1. The environment admin (AdminAccount from settings), if configured
2. A stored user with a bcrypt password hash

The first match wins. Every failure is the same `None` from verify()
and the same "Invalid credentials" from login(), whether the email was
unknown or the password was wrong.
"""

import asyncio
import secrets
from dataclasses import dataclass
from typing import Optional

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.identity import Identity
from unievents.auth.jwt import TokenIssuer
from unievents.auth.password import verify_password
from unievents.config import AdminAccount
from unievents.db.models import User
from unievents.errors import InvalidCredentials, MissingCredentials

logger = structlog.get_logger()


class CredentialVerifier:
    """Resolves an email/password pair to an Identity, or None."""

    def __init__(self, db: AsyncSession, admin: Optional[AdminAccount] = None):
        self.db = db
        self.admin = admin

    async def verify(self, email: str, password: str) -> Optional[Identity]:
        identity = self._verify_admin(email, password)
        if identity is not None:
            return identity
        return await self._verify_user(email, password)

    def _verify_admin(self, email: str, password: str) -> Optional[Identity]:
        if self.admin is None:
            return None
        email_matches = email.lower() == self.admin.email.lower()
        password_matches = secrets.compare_digest(
            password.encode("utf-8"), self.admin.password.encode("utf-8")
        )
        if not (email_matches and password_matches):
            return None
        return Identity.for_admin(self.admin)

    async def _verify_user(self, email: str, password: str) -> Optional[Identity]:
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        user = result.scalars().first()
        if user is None:
            return None

        ok = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not ok:
            return None
        return Identity.from_user(user)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: Identity


class AuthService:
    """Login orchestration: validate input, verify, issue a token."""

    def __init__(self, verifier: CredentialVerifier, issuer: TokenIssuer):
        self.verifier = verifier
        self.issuer = issuer

    async def login(
        self, email: Optional[str], password: Optional[str]
    ) -> LoginResult:
        if not email or not password:
            raise MissingCredentials()

        identity = await self.verifier.verify(email, password)
        if identity is None:
            logger.info("auth.login_failed")
            raise InvalidCredentials()

        logger.info("auth.login_succeeded", user_id=identity.id, role=identity.role)
        return LoginResult(token=self.issuer.issue(identity), user=identity)
