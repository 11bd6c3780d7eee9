"""FastAPI dependencies for authentication and services."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.errors import AuthenticationError
from src.services.auth import PasswordHasher
from src.services.post_service import PostService
from src.services.profile_service import ProfileService
from src.services.tokens import TokenExpiredError, TokenInvalidError, TokenService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# Path ids must fit a 32-bit INTEGER column
ResourceId = Annotated[int, Path(gt=0, le=2**31 - 1)]


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service built from settings."""
    return TokenService.from_settings(get_settings())


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher built from settings."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    x_auth_token: Annotated[str | None, Header()] = None,
) -> int:
    """Verify the caller's token and return the authenticated user id.

    Accepts ``Authorization: Bearer <token>`` and, for older clients, the
    ``x-auth-token`` header. Only the token's signature and expiry are
    checked; the user table is not consulted.
    """
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise AuthenticationError("No token, authorization denied")

    try:
        subject = tokens.verify(token)
    except TokenExpiredError:
        logger.info("Rejected expired token")
        raise AuthenticationError() from None
    except TokenInvalidError as e:
        logger.warning(f"Rejected invalid token: {e}")
        raise AuthenticationError() from None

    try:
        return int(subject)
    except ValueError:
        logger.warning("Rejected token with non-numeric subject")
        raise AuthenticationError() from None


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db)


def get_profile_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProfileService:
    """Get profile service with dependencies."""
    return ProfileService(db)
