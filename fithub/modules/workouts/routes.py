from fastapi import APIRouter, Depends, HTTPException, status
from fithub.modules.workouts.schemas import (
    WorkoutCreate, WorkoutUpdate, WorkoutResponse,
    WorkoutAssign, UserWorkoutResponse
)
from fithub.modules.workouts.service import WorkoutService
from fithub.core.dependencies import require_permission, is_staff, get_user_supabase
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_workout_service(supabase: Client = Depends(get_user_supabase)) -> WorkoutService:
    return WorkoutService(supabase)


@router.get("", response_model=List[WorkoutResponse])
async def list_workouts(
    difficulty_level: Optional[int] = None,
    member: Dict = Depends(require_permission("workouts:read")),
    service: WorkoutService = Depends(get_workout_service)
):
    """List workout plans"""
    return service.list_workouts(difficulty_level=difficulty_level)


@router.post("", response_model=WorkoutResponse, status_code=201)
async def create_workout(
    workout_data: WorkoutCreate,
    member: Dict = Depends(require_permission("workouts:create")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Create a workout plan"""
    return service.create_workout(workout_data)


@router.get("/assigned/me", response_model=List[UserWorkoutResponse])
async def list_my_workouts(
    limit: int = 20,
    member: Dict = Depends(require_permission("workouts:read")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Workouts assigned to the caller"""
    return service.list_user_workouts(member["id"], limit=limit)


@router.post("/assigned/{user_workout_id}/complete", response_model=UserWorkoutResponse)
async def complete_workout(
    user_workout_id: str,
    member: Dict = Depends(require_permission("workouts:complete")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Mark an assigned workout as completed (assignee, trainer or admin)"""
    if not is_staff(member):
        assignment = service.get_assignment(user_workout_id)
        if assignment.get("user_id") != member["id"]:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Workout is not assigned to you")
    return service.complete_assignment(user_workout_id)


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: str,
    member: Dict = Depends(require_permission("workouts:read")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Get workout plan by ID"""
    return service.get_workout_by_id(workout_id)


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: str,
    workout_data: WorkoutUpdate,
    member: Dict = Depends(require_permission("workouts:update")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Update workout plan"""
    return service.update_workout(workout_id, workout_data)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: str,
    member: Dict = Depends(require_permission("workouts:delete")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Delete workout plan"""
    service.delete_workout(workout_id)
    return None


@router.post("/{workout_id}/assign", response_model=UserWorkoutResponse, status_code=201)
async def assign_workout(
    workout_id: str,
    assignment: WorkoutAssign,
    member: Dict = Depends(require_permission("workouts:assign")),
    service: WorkoutService = Depends(get_workout_service)
):
    """Assign a workout to a member. Trainers are recorded as the assigning trainer."""
    trainer_id = member["id"] if member["role"] == "trainer" else None
    return service.assign_workout(workout_id, assignment, trainer_id=trainer_id)
