"""SQLAlchemy models."""

from src.models.post import Post, PostComment, PostLike
from src.models.profile import Experience, Profile
from src.models.user import User

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Post",
    "PostLike",
    "PostComment",
]
