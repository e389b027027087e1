from fastapi import APIRouter, Depends
from fithub.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from fithub.modules.profiles.service import ProfileService
from fithub.core.dependencies import require_permission, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_user_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    member: Dict = Depends(require_permission("profiles:read")),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the caller's own profile"""
    return service.get_profile(member["id"])


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    profile_data: ProfileUpdate,
    member: Dict = Depends(require_permission("profiles:update")),
    service: ProfileService = Depends(get_profile_service)
):
    """Update the caller's own profile"""
    return service.update_profile(member["id"], profile_data)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    limit: int = 10,
    offset: int = 0,
    member: Dict = Depends(require_permission("profiles:list")),
    service: ProfileService = Depends(get_profile_service)
):
    """List all member profiles (admin)"""
    return service.list_profiles(limit=limit, offset=offset)


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    member: Dict = Depends(require_permission("profiles:list")),
    service: ProfileService = Depends(get_profile_service)
):
    """Get any member's profile (admin)"""
    return service.get_profile(user_id)
