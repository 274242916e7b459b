"""JWT token issuing and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. The token
carries the whole Identity projection, so verifying a request never
touches the database. The flip side: a token keeps the role and
attributes it was issued with until it expires, even if the stored
user changes. There is no revocation; expiry is the only bound.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError

from unievents.auth.identity import Identity
from unievents.config import Settings
from unievents.errors import Unauthenticated


class TokenIssuer:
    """Signs identities into tokens and reads them back."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(days=30),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            lifetime=settings.token_lifetime,
        )

    def issue(self, identity: Identity, now: Optional[datetime] = None) -> str:
        """Create a signed token embedding the identity projection."""
        issued_at = now or datetime.now(timezone.utc)
        payload = identity.to_claims()
        payload.update(
            sub=identity.id,
            iat=issued_at,
            exp=issued_at + self.lifetime,
        )
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def authenticate(self, token: str) -> Identity:
        """Verify a token and rebuild the identity it was issued for.

        Raises Unauthenticated on a bad signature, expiry or a payload
        that is not an identity.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise Unauthenticated("Token has expired")
        except jwt.InvalidTokenError:
            raise Unauthenticated("Invalid token")

        try:
            return Identity.model_validate(payload)
        except ValidationError:
            raise Unauthenticated("Invalid token")
