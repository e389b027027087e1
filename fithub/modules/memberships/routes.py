from fastapi import APIRouter, Depends
from fithub.database.supabase_client import get_supabase
from fithub.modules.memberships.schemas import MembershipCreate, MembershipUpdate, MembershipResponse
from fithub.modules.memberships.service import MembershipService
from fithub.core.dependencies import require_permission, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/memberships", tags=["memberships"])


def get_membership_service(supabase: Client = Depends(get_supabase)) -> MembershipService:
    return MembershipService(supabase)


def get_admin_membership_service(supabase: Client = Depends(get_user_supabase)) -> MembershipService:
    return MembershipService(supabase)


@router.get("", response_model=List[MembershipResponse])
async def list_memberships(
    service: MembershipService = Depends(get_membership_service)
):
    """List membership plans (public, shown on the landing page)"""
    return service.list_memberships()


@router.get("/{membership_id}", response_model=MembershipResponse)
async def get_membership(
    membership_id: str,
    service: MembershipService = Depends(get_membership_service)
):
    """Get membership plan by ID"""
    return service.get_membership_by_id(membership_id)


@router.post("", response_model=MembershipResponse, status_code=201)
async def create_membership(
    membership_data: MembershipCreate,
    member: Dict = Depends(require_permission("memberships:create")),
    service: MembershipService = Depends(get_admin_membership_service)
):
    """Create a new membership plan"""
    return service.create_membership(membership_data)


@router.put("/{membership_id}", response_model=MembershipResponse)
async def update_membership(
    membership_id: str,
    membership_data: MembershipUpdate,
    member: Dict = Depends(require_permission("memberships:update")),
    service: MembershipService = Depends(get_admin_membership_service)
):
    """Update membership plan"""
    return service.update_membership(membership_id, membership_data)


@router.delete("/{membership_id}", status_code=204)
async def delete_membership(
    membership_id: str,
    member: Dict = Depends(require_permission("memberships:delete")),
    service: MembershipService = Depends(get_admin_membership_service)
):
    """Delete membership plan"""
    service.delete_membership(membership_id)
    return None
