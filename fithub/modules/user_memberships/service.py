import calendar
from supabase import Client
from fithub.modules.user_memberships.schemas import (
    EnrollmentCreate, EnrollmentResponse, UserMembershipResponse,
    ExpireResponse, RenewalResponse
)
from fithub.core.db_errors import to_http_exception
from typing import List, Optional
from fastapi import HTTPException
from datetime import date, datetime, timezone
import logging

logger = logging.getLogger(__name__)


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic; clamps to month end (Jan 31 + 1 month -> Feb 28/29)"""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class UserMembershipService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def enroll(self, enrollment: EnrollmentCreate) -> EnrollmentResponse:
        """Register a member on a plan: create the membership and its initial pending payment"""
        try:
            plan_result = self.supabase.table("memberships")\
                .select("duration_months, price")\
                .eq("id", enrollment.membership_id)\
                .maybe_single()\
                .execute()
            if not plan_result or not plan_result.data:
                raise HTTPException(status_code=404, detail="Membership plan not found")
            plan = plan_result.data

            end_date = add_months(enrollment.start_date, int(plan["duration_months"]))
            membership_result = self.supabase.table("user_memberships").insert({
                "user_id": enrollment.user_id,
                "membership_id": enrollment.membership_id,
                "trainer_id": enrollment.trainer_id,
                "start_date": enrollment.start_date.isoformat(),
                "end_date": end_date.isoformat(),
                "status": "active",
            }).execute()
            if not membership_result.data:
                raise HTTPException(status_code=500, detail="Failed to create membership")

            membership_row = membership_result.data[0]

            try:
                payment_result = self.supabase.table("payments").insert({
                    "user_id": enrollment.user_id,
                    "membership_id": enrollment.membership_id,
                    "amount": plan["price"],
                    "payment_date": date.today().isoformat(),
                    "status": "pending",
                    "payment_method": enrollment.payment_method,
                }).execute()
                if not payment_result.data:
                    raise HTTPException(status_code=500, detail="Failed to record payment")
            except Exception:
                # Enrollment and its first payment are all-or-nothing
                self._remove_membership(membership_row["id"])
                raise
            payment_id = payment_result.data[0]["id"]

            logger.info(
                f"Enrolled user {enrollment.user_id} on plan {enrollment.membership_id} "
                f"until {end_date.isoformat()}"
            )
            return EnrollmentResponse(
                membership=UserMembershipResponse(**membership_row),
                payment_id=payment_id,
                amount_due=float(plan["price"]),
            )
        except Exception as e:
            raise to_http_exception(e)

    def _remove_membership(self, user_membership_id: str):
        try:
            self.supabase.table("user_memberships").delete().eq("id", user_membership_id).execute()
            logger.warning(f"Rolled back membership {user_membership_id} after payment failure")
        except Exception as e:
            logger.error(f"Failed to roll back membership {user_membership_id}: {e}")

    def get_user_membership(self, user_membership_id: str) -> UserMembershipResponse:
        try:
            result = self.supabase.table("user_memberships")\
                .select("*")\
                .eq("id", user_membership_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Membership not found")
            return UserMembershipResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_user_memberships(
        self,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[UserMembershipResponse]:
        """List memberships, latest ending first"""
        try:
            query = self.supabase.table("user_memberships").select("*")
            if user_id:
                query = query.eq("user_id", user_id)
            if status:
                query = query.eq("status", status)
            result = query.order("end_date", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [UserMembershipResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def cancel(self, user_membership_id: str) -> UserMembershipResponse:
        """Cancel a membership. Already expired or cancelled memberships are left as they are."""
        current = self.get_user_membership(user_membership_id)
        if current.status != "active":
            raise HTTPException(status_code=400, detail=f"Membership is already {current.status}")
        try:
            result = self.supabase.table("user_memberships")\
                .update({
                    "status": "cancelled",
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("id", user_membership_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Membership not found")
            logger.info(f"Cancelled membership {user_membership_id}")
            return UserMembershipResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def expire_overdue(self, today: Optional[date] = None) -> ExpireResponse:
        """Mark every active membership whose end_date has passed as expired"""
        today = today or date.today()
        try:
            result = self.supabase.table("user_memberships")\
                .update({
                    "status": "expired",
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("status", "active")\
                .lt("end_date", today.isoformat())\
                .execute()
            expired = len(result.data or [])
            if expired:
                logger.info(f"Expired {expired} membership(s) ending before {today.isoformat()}")
            return ExpireResponse(expired=expired, checked_on=today)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_upcoming_renewals(self) -> List[RenewalResponse]:
        """Active memberships ending within the next 30 days"""
        try:
            result = self.supabase.table("upcoming_renewals")\
                .select("*")\
                .order("end_date")\
                .execute()
            return [RenewalResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
