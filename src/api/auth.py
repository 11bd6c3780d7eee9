"""Session (login) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user_id, get_password_hasher, get_token_service
from src.database import get_db
from src.errors import ValidationError
from src.schemas.auth import TokenResponse, UserLogin, UserResponse
from src.services.auth import PasswordHasher, authenticate_user, get_user
from src.services.tokens import TokenService

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, hasher, credentials.email, credentials.password)

    # Same message for unknown email and wrong password
    if not user:
        raise ValidationError("Credentials are invalid")

    return TokenResponse(token=tokens.issue(user.id))


@router.get("/me", response_model=UserResponse)
def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    return get_user(db, user_id)
