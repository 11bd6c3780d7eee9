"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import ResourceId, get_current_user_id, get_profile_service
from src.database import get_db
from src.schemas.profile import ExperienceCreate, ProfileResponse, ProfileUpsert
from src.services.auth import delete_user_account
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("", response_model=list[ProfileResponse])
def get_profiles(
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Get all profiles. Public."""
    return service.list_profiles()


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Get the current user's profile."""
    return service.get_profile_for_user(user_id)


@router.get("/user/{profile_user_id}", response_model=ProfileResponse)
def get_profile_by_user(
    profile_user_id: ResourceId,
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Get a profile by its owner's user id. Public."""
    return service.get_profile_for_user(profile_user_id)


@router.post("", response_model=ProfileResponse)
def upsert_profile(
    profile_data: ProfileUpsert,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Create or update the current user's profile."""
    return service.upsert_profile(user_id, profile_data)


@router.delete("")
def delete_account(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the current user's profile, posts and account."""
    delete_user_account(db, user_id)
    return {"msg": f"User {user_id} deleted"}


@router.put("/experience", response_model=ProfileResponse)
def add_experience(
    experience_data: ExperienceCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Add an experience entry to the current user's profile."""
    return service.add_experience(user_id, experience_data)


@router.delete("/experience/{experience_id}", response_model=ProfileResponse)
def delete_experience(
    experience_id: ResourceId,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Remove an experience entry from the current user's profile."""
    return service.delete_experience(user_id, experience_id)
