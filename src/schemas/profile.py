"""Profile and experience schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.auth import UserSummary


class ProfileUpsert(BaseModel):
    """Create or update the current user's profile."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str = Field(..., min_length=1, max_length=255)
    # Comma separated ("python, sql") or an explicit list
    skills: str | list[str]
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=5000)
    githubusername: str | None = Field(None, max_length=255)
    youtube: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(None, max_length=500)

    @field_validator("skills")
    @classmethod
    def skills_not_empty(cls, value: str | list[str]) -> str | list[str]:
        entries = value.split(",") if isinstance(value, str) else value
        if not any(entry.strip() for entry in entries):
            raise ValueError("Skills is required")
        return value


class ExperienceCreate(BaseModel):
    """Add an experience entry. Dates use the ``from``/``to`` keys on the wire."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = Field(None, max_length=5000)


class ExperienceResponse(BaseModel):
    """Experience entry response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    company: str
    location: str | None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None


class ProfileResponse(BaseModel):
    """Profile response including the owner's public details."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user: UserSummary
    status: str
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    githubusername: str | None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse] = []
    created_at: datetime
    updated_at: datetime
