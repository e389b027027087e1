"""
Dashboard aggregation.

Each figure is an independent query; a failing query is logged and the figure
falls back to its empty value so the rest of the dashboard still renders.
"""

from supabase import Client
from fithub.modules.dashboard.schemas import (
    ClientDashboardResponse, DashboardProfile, ActiveMembership,
    AdminDashboardResponse, DashboardStats, RecentMember
)
from fithub.modules.payments.service import sum_amounts
from fithub.modules.workouts.service import WorkoutService
from fithub.config.settings import settings
from typing import Callable, Dict, List, Optional, Any
import logging

logger = logging.getLogger(__name__)

NO_TRAINER = "Not assigned"


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _safe(self, label: str, fetch: Callable[[], Any], default: Any) -> Any:
        try:
            return fetch()
        except Exception as e:
            logger.error(f"Error fetching dashboard {label}: {e}")
            return default

    def _count(self, table: str, **filters) -> int:
        query = self.supabase.table(table).select("*", count="exact").limit(1)
        for column, value in filters.items():
            query = query.eq(column, value)
        return query.execute().count or 0

    def _profile_names(self, user_ids: List[str]) -> Dict[str, dict]:
        ids = [i for i in set(user_ids) if i]
        if not ids:
            return {}
        result = self.supabase.table("profiles")\
            .select("id, full_name, email")\
            .in_("id", ids)\
            .execute()
        return {p["id"]: p for p in result.data or []}

    # Client

    def _client_profile(self, user_id: str) -> Optional[DashboardProfile]:
        result = self.supabase.table("profiles")\
            .select("full_name, email")\
            .eq("id", user_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return DashboardProfile(**result.data)

    def _active_membership(self, user_id: str) -> Optional[ActiveMembership]:
        result = self.supabase.table("user_memberships")\
            .select("end_date, trainer_id, memberships(name)")\
            .eq("user_id", user_id)\
            .eq("status", "active")\
            .order("end_date", desc=True)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        row = result.data[0]
        trainer_name = None
        if row.get("trainer_id"):
            trainer = self._profile_names([row["trainer_id"]]).get(row["trainer_id"])
            trainer_name = trainer.get("full_name") if trainer else None
        return ActiveMembership(
            name=(row.get("memberships") or {}).get("name") or "",
            end_date=row["end_date"],
            trainer_name=trainer_name,
        )

    def get_client_dashboard(self, user_id: str) -> ClientDashboardResponse:
        profile = self._safe("profile", lambda: self._client_profile(user_id), None)
        membership = self._safe("membership", lambda: self._active_membership(user_id), None)
        workouts = self._safe(
            "workouts",
            lambda: WorkoutService(self.supabase).list_user_workouts(user_id, limit=settings.recent_workouts_limit),
            [],
        )
        return ClientDashboardResponse(
            profile=profile,
            membership=membership,
            next_payment_date=membership.end_date if membership else None,
            recent_workouts=workouts,
            workout_count=len(workouts),
        )

    # Admin

    def _total_revenue(self) -> float:
        result = self.supabase.table("payments")\
            .select("amount")\
            .eq("status", "completed")\
            .execute()
        return sum_amounts(result.data or [])

    def _recent_members(self) -> List[RecentMember]:
        result = self.supabase.table("user_memberships")\
            .select("user_id, trainer_id, end_date, memberships(name)")\
            .eq("status", "active")\
            .order("end_date")\
            .limit(settings.recent_members_limit)\
            .execute()
        rows = result.data or []
        people = self._profile_names(
            [r.get("user_id") for r in rows] + [r.get("trainer_id") for r in rows]
        )
        members = []
        for row in rows:
            profile = people.get(row.get("user_id"), {})
            trainer = people.get(row.get("trainer_id"), {})
            members.append(RecentMember(
                id=row["user_id"],
                full_name=profile.get("full_name"),
                email=profile.get("email"),
                membership_name=(row.get("memberships") or {}).get("name"),
                trainer_name=trainer.get("full_name") or NO_TRAINER,
                end_date=row["end_date"],
            ))
        return members

    def get_admin_dashboard(self) -> AdminDashboardResponse:
        stats = DashboardStats(
            total_members=self._safe("member count", lambda: self._count("profiles"), 0),
            active_members=self._safe(
                "active member count", lambda: self._count("user_memberships", status="active"), 0
            ),
            total_revenue=self._safe("revenue", self._total_revenue, 0),
            upcoming_renewals=self._safe("renewal count", lambda: self._count("upcoming_renewals"), 0),
        )
        recent_members = self._safe("recent members", self._recent_members, [])
        return AdminDashboardResponse(stats=stats, recent_members=recent_members)
