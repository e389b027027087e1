from fastapi import APIRouter, Depends
from fithub.modules.user_memberships.schemas import (
    EnrollmentCreate, EnrollmentResponse, UserMembershipResponse,
    ExpireResponse, RenewalResponse, MembershipStatus
)
from fithub.modules.user_memberships.service import UserMembershipService
from fithub.core.dependencies import require_permission, is_admin, get_user_supabase
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/user-memberships", tags=["user-memberships"])


def get_user_membership_service(supabase: Client = Depends(get_user_supabase)) -> UserMembershipService:
    return UserMembershipService(supabase)


@router.post("", response_model=EnrollmentResponse, status_code=201)
async def enroll_member(
    enrollment: EnrollmentCreate,
    member: Dict = Depends(require_permission("user_memberships:create")),
    service: UserMembershipService = Depends(get_user_membership_service)
):
    """Enroll a member on a plan; creates the initial pending payment"""
    return service.enroll(enrollment)


@router.get("", response_model=List[UserMembershipResponse])
async def list_user_memberships(
    user_id: Optional[str] = None,
    status: Optional[MembershipStatus] = None,
    limit: int = 50,
    offset: int = 0,
    member: Dict = Depends(require_permission("user_memberships:read")),
    service: UserMembershipService = Depends(get_user_membership_service)
):
    """List memberships. Clients only ever see their own."""
    if not is_admin(member):
        user_id = member["id"]
    return service.list_user_memberships(user_id=user_id, status=status, limit=limit, offset=offset)


@router.get("/renewals", response_model=List[RenewalResponse])
async def list_upcoming_renewals(
    member: Dict = Depends(require_permission("user_memberships:renewals")),
    service: UserMembershipService = Depends(get_user_membership_service)
):
    """Memberships due for renewal in the next 30 days"""
    return service.list_upcoming_renewals()


@router.post("/expire", response_model=ExpireResponse)
async def expire_overdue_memberships(
    member: Dict = Depends(require_permission("user_memberships:expire")),
    service: UserMembershipService = Depends(get_user_membership_service)
):
    """Expire every active membership whose end date has passed"""
    return service.expire_overdue()


@router.post("/{user_membership_id}/cancel", response_model=UserMembershipResponse)
async def cancel_membership(
    user_membership_id: str,
    member: Dict = Depends(require_permission("user_memberships:update")),
    service: UserMembershipService = Depends(get_user_membership_service)
):
    """Cancel an active membership"""
    return service.cancel(user_membership_id)
