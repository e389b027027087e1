from supabase import Client
from fithub.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from typing import List
from fastapi import HTTPException
from datetime import datetime, timezone


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile(self, user_id: str) -> ProfileResponse:
        """Get member profile by ID"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_profile(self, user_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Update member profile. Optional fields left out of the request are not touched."""
        try:
            update_data = profile_data.model_dump(exclude_unset=True)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_profiles(self, limit: int = 10, offset: int = 0) -> List[ProfileResponse]:
        """List member profiles, newest first"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [ProfileResponse(**profile) for profile in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
