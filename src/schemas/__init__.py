"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import TokenResponse, UserLogin, UserRegister, UserResponse, UserSummary
from src.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from src.schemas.profile import (
    ExperienceCreate,
    ExperienceResponse,
    ProfileResponse,
    ProfileUpsert,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "UserResponse",
    "UserSummary",
    "PostCreate",
    "PostResponse",
    "CommentCreate",
    "CommentResponse",
    "LikeResponse",
    "ProfileUpsert",
    "ProfileResponse",
    "ExperienceCreate",
    "ExperienceResponse",
]
