"""Profile model."""

from sqlalchemy import JSON, Boolean, Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Profile(Base, TimestampMixin):
    """Developer profile, at most one per user."""

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
    )
    company = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)
    location = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    status = Column(String(255), nullable=False)
    githubusername = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    # {"youtube": "...", "twitter": "..."}; only the links that were supplied
    social = Column(JSON, nullable=False, default=dict)

    # Relationships
    user = relationship("User", lazy="joined")
    experience = relationship(
        "Experience",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Experience.id.desc()",
    )


class Experience(Base):
    """Work experience entry attached to a profile."""

    __tablename__ = "profile_experiences"

    id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=True)
    current = Column(Boolean, default=False, nullable=False)
    description = Column(Text, nullable=True)

    profile = relationship("Profile", back_populates="experience")
