"""Identity registration endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_password_hasher, get_token_service
from src.database import get_db
from src.schemas.auth import TokenResponse, UserRegister
from src.services.auth import PasswordHasher, create_user
from src.services.tokens import TokenService

router = APIRouter(prefix="/api/identities", tags=["identities"])


@router.post("", response_model=TokenResponse)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user and return an access token."""
    user = create_user(db, hasher, user_data.name, user_data.email, user_data.password)
    return TokenResponse(token=tokens.issue(user.id))
