from fastapi import APIRouter, Depends, HTTPException, status
from fithub.database.supabase_client import get_service_supabase
from fithub.modules.trainers.schemas import TrainerCreate, TrainerResponse, TrainerClientResponse
from fithub.modules.trainers.service import TrainerService
from fithub.core.dependencies import require_permission, require_role, is_admin, get_user_supabase
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/trainers", tags=["trainers"])


def get_trainer_service(
    supabase: Client = Depends(get_user_supabase),
    service_supabase: Client = Depends(get_service_supabase)
) -> TrainerService:
    return TrainerService(supabase, service_supabase)


@router.get("", response_model=List[TrainerResponse])
async def list_trainers(
    member: Dict = Depends(require_permission("trainers:read")),
    service: TrainerService = Depends(get_trainer_service)
):
    """List trainers with their current client load"""
    return service.list_trainers()


@router.post("", response_model=TrainerResponse, status_code=201)
async def create_trainer(
    trainer_data: TrainerCreate,
    member: Dict = Depends(require_role("admin")),
    service: TrainerService = Depends(get_trainer_service)
):
    """Promote a member to trainer"""
    return service.create_trainer(trainer_data)


@router.get("/{trainer_id}/clients", response_model=List[TrainerClientResponse])
async def get_trainer_clients(
    trainer_id: str,
    member: Dict = Depends(require_permission("trainers:clients")),
    service: TrainerService = Depends(get_trainer_service)
):
    """Active clients of a trainer (admin, or the trainer themself)"""
    if not is_admin(member) and member["id"] != trainer_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Trainers can only view their own clients")
    return service.get_trainer_clients(trainer_id)
