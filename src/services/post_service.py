"""Post service for posts, likes and comments."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.errors import AuthorizationError, NotFoundError
from src.models.post import Post, PostComment, PostLike
from src.models.user import User
from src.services.auth import get_user
from src.services.ownership import authorize, ensure_owner

logger = logging.getLogger(__name__)


class PostService:
    """Service for post-related operations.

    Every mutating method reads the resource, checks ownership and writes
    within the same session, committing once at the end.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        return (
            self.db.query(Post)
            .options(selectinload(Post.likes), selectinload(Post.comments))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )

    def get_post(self, post_id: int) -> Post:
        """Get a post or raise NotFoundError."""
        post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, user_id: int | str, text: str) -> Post:
        """Create a post, copying the author's name and avatar."""
        author: User = get_user(self.db, user_id)
        post = Post(user_id=author.id, text=text, name=author.name, avatar=author.avatar)
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        return post

    def delete_post(self, post_id: int, user_id: int | str) -> None:
        """Delete a post owned by ``user_id``."""
        post = self.get_post(post_id)
        ensure_owner(user_id, post.user_id, "User is not authorized to delete this post")
        self.db.delete(post)
        self.db.commit()
        logger.info(f"Post {post_id} deleted by user {user_id}")

    def toggle_like(self, post_id: int, user_id: int | str) -> list[PostLike]:
        """Like the post, or remove the like if ``user_id`` already liked it."""
        liker: User = get_user(self.db, user_id)
        post = self.get_post(post_id)
        existing = next((like for like in post.likes if authorize(liker.id, like.user_id)), None)

        if existing is not None:
            post.likes.remove(existing)
            logger.debug(f"User {user_id} unliked post {post_id}")
        else:
            post.likes.append(PostLike(user_id=liker.id))
            logger.debug(f"User {user_id} liked post {post_id}")

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Only a concurrent insert of the same like is expected here
            if existing is not None or not self._has_liked(post_id, liker.id):
                raise
            logger.info(f"Duplicate like on post {post_id} by user {user_id} ignored")

        self.db.refresh(post)
        return post.likes

    def _has_liked(self, post_id: int, user_id: int) -> bool:
        return (
            self.db.query(PostLike.id)
            .filter(PostLike.post_id == post_id, PostLike.user_id == user_id)
            .first()
            is not None
        )

    def add_comment(self, post_id: int, user_id: int | str, text: str) -> list[PostComment]:
        """Add a comment to a post."""
        author: User = get_user(self.db, user_id)
        post = self.get_post(post_id)
        post.comments.append(
            PostComment(user_id=author.id, text=text, name=author.name, avatar=author.avatar)
        )
        self.db.commit()
        self.db.refresh(post)
        return post.comments

    def delete_comment(
        self, post_id: int, comment_id: int, user_id: int | str
    ) -> list[PostComment]:
        """Delete a comment. The comment's author or the post's owner may do this."""
        post = self.get_post(post_id)
        comment = next((c for c in post.comments if c.id == comment_id), None)
        if comment is None:
            raise NotFoundError("Comment does not exist")

        if not (authorize(user_id, comment.user_id) or authorize(user_id, post.user_id)):
            logger.warning(f"User {user_id} denied deletion of comment {comment_id}")
            raise AuthorizationError("User is not authorized to delete this comment")

        post.comments.remove(comment)
        self.db.commit()
        self.db.refresh(post)
        logger.info(f"Comment {comment_id} on post {post_id} deleted by user {user_id}")
        return post.comments
