from pydantic import BaseModel, Field, model_validator
from typing import Optional, Any
from datetime import date, datetime
from fithub.core.validation import reject_nulls


class WorkoutCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    difficulty_level: Optional[int] = Field(None, ge=1, le=5)
    duration_minutes: int = Field(..., ge=1)
    exercises: Any

    @model_validator(mode="before")
    @classmethod
    def exercises_not_null(cls, data):
        return reject_nulls(data, ("exercises",))


class WorkoutUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    difficulty_level: Optional[int] = Field(None, ge=1, le=5)
    duration_minutes: Optional[int] = Field(None, ge=1)
    exercises: Optional[Any] = None

    @model_validator(mode="before")
    @classmethod
    def not_null_columns(cls, data):
        return reject_nulls(data, ("name", "duration_minutes", "exercises"))


class WorkoutResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    difficulty_level: Optional[int] = None
    duration_minutes: int
    exercises: Any
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WorkoutAssign(BaseModel):
    user_id: str
    assigned_date: date = Field(default_factory=date.today)
    trainer_id: Optional[str] = None  # Ignored when a trainer assigns; they are recorded themselves
    notes: Optional[str] = None


class UserWorkoutResponse(BaseModel):
    id: str
    user_id: str
    workout_id: str
    trainer_id: Optional[str] = None
    workout_name: Optional[str] = None
    exercises: Optional[Any] = None
    assigned_date: date
    completed_date: Optional[date] = None
    notes: Optional[str] = None
    status: str

    class Config:
        from_attributes = True
