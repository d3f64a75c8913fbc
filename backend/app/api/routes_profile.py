from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_current_user, get_optional_user, get_profile_repo
from app.models.user import User
from app.repositories.base import DataAccessError
from app.repositories.profile_repo import ProfileRepository
from app.schemas.profile_schema import ProfileIn, ProfileOut

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post(
    "", response_model=ProfileOut, status_code=status.HTTP_201_CREATED, summary="Create profile"
)
def create_profile(
    payload: ProfileIn,
    caller: Optional[User] = Depends(get_optional_user),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    # anonymous sign-up names its user in the body; a signed-in caller can
    # only ever create their own profile
    if caller is not None:
        user_id = caller.user_id
    elif payload.user_id is not None:
        user_id = payload.user_id
    else:
        raise HTTPException(status_code=400, detail="userId is required.")
    try:
        return ProfileOut.model_validate(repo.create(payload.to_model(user_id)))
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error creating profile.")


@router.get("", response_model=ProfileOut, summary="Get own profile")
def get_profile(
    caller: User = Depends(get_current_user),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    try:
        profile = repo.get_by_user_id(caller.user_id)
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error retrieving profile.")
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found.")
    return ProfileOut.model_validate(profile)


@router.put("", response_model=ProfileOut, summary="Update own profile")
def update_profile(
    payload: ProfileIn,
    caller: User = Depends(get_current_user),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    # the body's userId is ignored
    profile = payload.to_model(caller.user_id)
    try:
        outcome = repo.update(profile)
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error updating profile.")
    if not outcome.ok:
        raise HTTPException(status_code=500, detail="Error updating profile.")
    return ProfileOut.model_validate(profile)
