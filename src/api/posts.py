"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import ResourceId, get_current_user_id, get_post_service
from src.schemas.post import CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse
from src.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post("", response_model=PostResponse)
def create_post(
    post_data: PostCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a post."""
    return service.create_post(user_id, post_data.text)


@router.get("", response_model=list[PostResponse])
def get_posts(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get all posts, newest first."""
    return service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: ResourceId,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a post by id."""
    return service.get_post(post_id)


@router.delete("/{post_id}")
def delete_post(
    post_id: ResourceId,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post owned by the current user."""
    service.delete_post(post_id, user_id)
    return {"msg": f"Post {post_id} deleted"}


@router.put("/{post_id}/like", response_model=list[LikeResponse])
def toggle_like(
    post_id: ResourceId,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Like a post, or unlike it if the current user already liked it."""
    return service.toggle_like(post_id, user_id)


@router.post("/{post_id}/comments", response_model=list[CommentResponse])
def add_comment(
    post_id: ResourceId,
    comment_data: CommentCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Add a comment to a post."""
    return service.add_comment(post_id, user_id, comment_data.text)


@router.delete("/{post_id}/comments/{comment_id}", response_model=list[CommentResponse])
def delete_comment(
    post_id: ResourceId,
    comment_id: ResourceId,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a comment. Allowed for the comment's author and the post's owner."""
    return service.delete_comment(post_id, comment_id, user_id)
