"""Authentication service for password handling and user accounts."""

import hashlib
import logging
from urllib.parse import urlencode

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import NotFoundError, ValidationError
from src.models.post import Post, PostComment, PostLike
from src.models.profile import Profile
from src.models.user import User

logger = logging.getLogger(__name__)

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"


class PasswordHasher:
    """Salted bcrypt hashing with a fixed cost factor."""

    def __init__(self, rounds: int = 10):
        if rounds < 10:
            raise ValueError("bcrypt rounds must be at least 10")
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash."""
        if not password or not password_hash:
            return False
        return self._context.verify(password, password_hash)


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Build the gravatar avatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()  # noqa: S324
    return f"{GRAVATAR_BASE_URL}{digest}?{urlencode({'s': size, 'r': rating, 'd': default})}"


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def get_user(db: Session, user_id: int | str) -> User:
    """Get a user by id or raise NotFoundError."""
    try:
        user = db.get(User, int(user_id))
    except (TypeError, ValueError):
        user = None
    if user is None:
        raise NotFoundError("User not found")
    return user


def create_user(
    db: Session, hasher: PasswordHasher, name: str, email: str, password: str
) -> User:
    """Create a new user, rejecting duplicate emails."""
    email = email.lower()
    if get_user_by_email(db, email):
        raise ValidationError("User already exists")

    user = User(
        name=name,
        email=email,
        avatar=gravatar_url(email),
        password_hash=hasher.hash(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ValidationError("User already exists") from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, hasher: PasswordHasher, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not hasher.verify(password, user.password_hash):
        return None
    return user


def delete_user_account(db: Session, user_id: int | str) -> None:
    """Delete a user together with their profile, posts, comments and likes."""
    user = get_user(db, user_id)
    uid = user.id

    own_post_ids = select(Post.id).where(Post.user_id == uid)
    db.query(PostLike).filter(
        (PostLike.user_id == uid) | PostLike.post_id.in_(own_post_ids)
    ).delete(synchronize_session=False)
    db.query(PostComment).filter(
        (PostComment.user_id == uid) | PostComment.post_id.in_(own_post_ids)
    ).delete(synchronize_session=False)
    db.query(Post).filter(Post.user_id == uid).delete(synchronize_session=False)

    profile = db.query(Profile).filter(Profile.user_id == uid).first()
    if profile:
        db.delete(profile)

    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {uid} and all owned resources")
