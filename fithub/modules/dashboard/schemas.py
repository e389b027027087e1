from pydantic import BaseModel
from typing import Optional, List
from datetime import date
from fithub.modules.workouts.schemas import UserWorkoutResponse


class DashboardProfile(BaseModel):
    full_name: str
    email: str


class ActiveMembership(BaseModel):
    name: str
    end_date: date
    trainer_name: Optional[str] = None


class ClientDashboardResponse(BaseModel):
    profile: Optional[DashboardProfile] = None
    membership: Optional[ActiveMembership] = None
    next_payment_date: Optional[date] = None
    recent_workouts: List[UserWorkoutResponse]
    workout_count: int


class DashboardStats(BaseModel):
    total_members: int = 0
    active_members: int = 0
    total_revenue: float = 0
    upcoming_renewals: int = 0


class RecentMember(BaseModel):
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    membership_name: Optional[str] = None
    trainer_name: str
    end_date: date


class AdminDashboardResponse(BaseModel):
    stats: DashboardStats
    recent_members: List[RecentMember]
