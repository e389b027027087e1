from supabase import Client
from fithub.modules.workouts.schemas import (
    WorkoutCreate, WorkoutUpdate, WorkoutResponse,
    WorkoutAssign, UserWorkoutResponse
)
from fithub.core.db_errors import to_http_exception
from typing import List, Optional
from fastapi import HTTPException
from datetime import date, datetime, timezone
import logging

logger = logging.getLogger(__name__)


def workout_status(completed_date) -> str:
    return "Completed" if completed_date else "Pending"


def to_user_workout(row: dict) -> UserWorkoutResponse:
    """Flatten a user_workouts row with its embedded workouts(name, exercises)"""
    workout = row.get("workouts") or {}
    return UserWorkoutResponse(
        **{k: v for k, v in row.items() if k != "workouts"},
        workout_name=workout.get("name"),
        exercises=workout.get("exercises"),
        status=workout_status(row.get("completed_date")),
    )


class WorkoutService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_workout(self, workout_data: WorkoutCreate) -> WorkoutResponse:
        """Create a new workout plan"""
        try:
            result = self.supabase.table("workouts")\
                .insert(workout_data.model_dump())\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create workout")
            return WorkoutResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def get_workout_by_id(self, workout_id: str) -> WorkoutResponse:
        try:
            result = self.supabase.table("workouts")\
                .select("*")\
                .eq("id", workout_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Workout not found")
            return WorkoutResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_workouts(self, difficulty_level: Optional[int] = None) -> List[WorkoutResponse]:
        try:
            query = self.supabase.table("workouts").select("*")
            if difficulty_level is not None:
                query = query.eq("difficulty_level", difficulty_level)
            result = query.order("name").execute()
            return [WorkoutResponse(**w) for w in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_workout(self, workout_id: str, workout_data: WorkoutUpdate) -> WorkoutResponse:
        try:
            update_data = workout_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_workout_by_id(workout_id)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table("workouts")\
                .update(update_data)\
                .eq("id", workout_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Workout not found")
            return WorkoutResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def delete_workout(self, workout_id: str) -> bool:
        try:
            result = self.supabase.table("workouts")\
                .delete()\
                .eq("id", workout_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Workout not found")
            return True
        except Exception as e:
            raise to_http_exception(e)

    def assign_workout(self, workout_id: str, assignment: WorkoutAssign, trainer_id: Optional[str] = None) -> UserWorkoutResponse:
        """Assign a workout to a member"""
        workout = self.get_workout_by_id(workout_id)
        try:
            result = self.supabase.table("user_workouts").insert({
                "user_id": assignment.user_id,
                "workout_id": workout_id,
                "trainer_id": trainer_id or assignment.trainer_id,
                "assigned_date": assignment.assigned_date.isoformat(),
                "notes": assignment.notes,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to assign workout")
            row = dict(result.data[0])
            row["workouts"] = {"name": workout.name, "exercises": workout.exercises}
            logger.info(f"Assigned workout {workout_id} to user {assignment.user_id}")
            return to_user_workout(row)
        except Exception as e:
            raise to_http_exception(e)

    def get_assignment(self, user_workout_id: str) -> dict:
        try:
            result = self.supabase.table("user_workouts")\
                .select("*, workouts(name, exercises)")\
                .eq("id", user_workout_id)\
                .maybe_single()\
                .execute()
            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Workout assignment not found")
            return result.data
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_user_workouts(self, user_id: str, limit: int = 20) -> List[UserWorkoutResponse]:
        """A member's assigned workouts, most recently assigned first"""
        try:
            result = self.supabase.table("user_workouts")\
                .select("*, workouts(name, exercises)")\
                .eq("user_id", user_id)\
                .order("assigned_date", desc=True)\
                .limit(limit)\
                .execute()
            return [to_user_workout(row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def complete_assignment(self, user_workout_id: str, completed_on: Optional[date] = None) -> UserWorkoutResponse:
        """Mark an assigned workout as completed"""
        assignment = self.get_assignment(user_workout_id)
        if assignment.get("completed_date"):
            return to_user_workout(assignment)
        try:
            result = self.supabase.table("user_workouts")\
                .update({
                    "completed_date": (completed_on or date.today()).isoformat(),
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("id", user_workout_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Workout assignment not found")
            row = dict(result.data[0])
            row["workouts"] = assignment.get("workouts")
            return to_user_workout(row)
        except Exception as e:
            raise to_http_exception(e)
