from fastapi import APIRouter, Depends
from fithub.modules.dashboard.schemas import ClientDashboardResponse, AdminDashboardResponse
from fithub.modules.dashboard.service import DashboardService
from fithub.core.dependencies import require_permission, get_user_supabase
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_user_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("/client", response_model=ClientDashboardResponse)
async def client_dashboard(
    member: Dict = Depends(require_permission("dashboard:client")),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Membership, trainer, next payment and recent workouts for the caller"""
    return service.get_client_dashboard(member["id"])


@router.get("/admin", response_model=AdminDashboardResponse)
async def admin_dashboard(
    member: Dict = Depends(require_permission("dashboard:admin")),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Membership and revenue statistics plus the members expiring soonest"""
    return service.get_admin_dashboard()
