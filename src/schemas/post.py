"""Post, like and comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Create a new post."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., min_length=1, max_length=10000)


class CommentCreate(BaseModel):
    """Add a comment to a post."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., min_length=1, max_length=5000)


class LikeResponse(BaseModel):
    """A like on a post."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int


class CommentResponse(BaseModel):
    """A comment on a post."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    text: str
    name: str | None
    avatar: str | None
    created_at: datetime


class PostResponse(BaseModel):
    """Post response with likes and comments, newest first."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []
    created_at: datetime
