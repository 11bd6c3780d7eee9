"""Signed, time-limited access tokens."""

import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from src.config import Settings

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenExpiredError(TokenError):
    """Token signature is valid but its expiry has passed."""


class TokenInvalidError(TokenError):
    """Token is malformed, mis-signed or missing its subject."""


class TokenService:
    """Issue and verify JWT access tokens.

    The signing secret, algorithm and lifetime are fixed at construction;
    rotating the secret means building a new service, which invalidates
    every outstanding token.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 360000):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = timedelta(seconds=expires_in)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=settings.jwt_expiration_seconds,
        )

    def issue(self, subject: int | str, issued_at: datetime | None = None) -> str:
        """Create a signed token asserting ``subject``."""
        issued_at = issued_at or datetime.now(UTC)
        claims = {
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the token's subject or raise a TokenError subclass."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise TokenInvalidError(str(e)) from e

        subject = payload.get("sub")
        if not subject:
            raise TokenInvalidError("Token has no subject")
        return subject
