"""Profile service for developer profiles and their experience entries."""

import logging

from sqlalchemy.orm import Session

from src.errors import NotFoundError
from src.models.profile import Experience, Profile
from src.schemas.profile import ExperienceCreate, ProfileUpsert
from src.services.auth import get_user

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_FIELDS = ("youtube", "facebook", "twitter", "instagram", "linkedin")


def parse_skills(skills: str | list[str]) -> list[str]:
    """Split a comma separated skills string into trimmed, non-empty entries."""
    if isinstance(skills, str):
        skills = skills.split(",")
    return [skill.strip() for skill in skills if skill and skill.strip()]


class ProfileService:
    """Service for profile-related operations.

    Profiles are always addressed through the authenticated user's id, so the
    owner of a profile is the only caller able to change it.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_profiles(self) -> list[Profile]:
        return self.db.query(Profile).order_by(Profile.id).all()

    def get_profile_for_user(self, user_id: int | str) -> Profile:
        """Get the profile belonging to ``user_id`` or raise NotFoundError."""
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            raise NotFoundError("Profile not found") from None
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is None:
            raise NotFoundError("There is no profile for this user")
        return profile

    def upsert_profile(self, user_id: int | str, data: ProfileUpsert) -> Profile:
        """Create the user's profile, or update the fields supplied in ``data``."""
        user = get_user(self.db, user_id)

        fields = {}
        for name in PROFILE_FIELDS:
            value = getattr(data, name)
            if value:
                fields[name] = value
        if data.skills:
            fields["skills"] = parse_skills(data.skills)
        fields["social"] = {
            name: getattr(data, name) for name in SOCIAL_FIELDS if getattr(data, name)
        }

        profile = self.db.query(Profile).filter(Profile.user_id == user.id).first()
        if profile is None:
            profile = Profile(user_id=user.id, **fields)
            self.db.add(profile)
            logger.info(f"Created profile for user {user.id}")
        else:
            for name, value in fields.items():
                setattr(profile, name, value)

        self.db.commit()
        self.db.refresh(profile)
        return profile

    def add_experience(self, user_id: int | str, data: ExperienceCreate) -> Profile:
        """Add an experience entry to the user's profile."""
        profile = self.get_profile_for_user(user_id)
        profile.experience.append(
            Experience(
                title=data.title,
                company=data.company,
                location=data.location,
                from_date=data.from_date,
                to_date=data.to_date,
                current=data.current,
                description=data.description,
            )
        )
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def delete_experience(self, user_id: int | str, experience_id: int) -> Profile:
        """Remove an experience entry from the user's profile."""
        profile = self.get_profile_for_user(user_id)
        entry = next((exp for exp in profile.experience if exp.id == experience_id), None)
        if entry is None:
            raise NotFoundError("Experience not found")

        profile.experience.remove(entry)
        self.db.commit()
        self.db.refresh(profile)
        return profile
