from supabase import Client
from fithub.modules.memberships.schemas import MembershipCreate, MembershipUpdate, MembershipResponse
from fithub.core.db_errors import to_http_exception
from typing import List
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class MembershipService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_membership(self, membership_data: MembershipCreate) -> MembershipResponse:
        """Create a new membership plan"""
        try:
            result = self.supabase.table("memberships")\
                .insert(membership_data.model_dump())\
                .execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create membership plan")

            logger.info(f"Created membership plan {membership_data.name}")
            return MembershipResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def get_membership_by_id(self, membership_id: str) -> MembershipResponse:
        """Get membership plan by ID"""
        try:
            result = self.supabase.table("memberships")\
                .select("*")\
                .eq("id", membership_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Membership plan not found")

            return MembershipResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_memberships(self) -> List[MembershipResponse]:
        """List all plans, cheapest first"""
        try:
            result = self.supabase.table("memberships")\
                .select("*")\
                .order("price")\
                .execute()
            return [MembershipResponse(**plan) for plan in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_membership(self, membership_id: str, membership_data: MembershipUpdate) -> MembershipResponse:
        """Update membership plan"""
        try:
            update_data = membership_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_membership_by_id(membership_id)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("memberships")\
                .update(update_data)\
                .eq("id", membership_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Membership plan not found")

            return MembershipResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def delete_membership(self, membership_id: str) -> bool:
        """Delete membership plan. Plans referenced by enrollments or payments cannot be deleted."""
        try:
            result = self.supabase.table("memberships")\
                .delete()\
                .eq("id", membership_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Membership plan not found")
            return True
        except HTTPException:
            raise
        except Exception as e:
            if getattr(e, "code", None) == "23503":
                raise HTTPException(status_code=409, detail="Membership plan is in use")
            raise to_http_exception(e)
