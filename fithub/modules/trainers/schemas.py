from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import date, datetime


class TrainerCreate(BaseModel):
    user_id: str
    specialization: str = Field(..., min_length=1)
    experience_years: int = Field(..., ge=0)
    certification: Optional[str] = None
    availability: Optional[Dict[str, Any]] = None


class TrainerResponse(BaseModel):
    id: str
    full_name: Optional[str] = None
    specialization: str
    experience_years: int
    certification: Optional[str] = None
    availability: Optional[Dict[str, Any]] = None
    active_clients: int = 0
    capacity: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TrainerClientResponse(BaseModel):
    trainer_id: str
    trainer_name: Optional[str] = None
    client_name: str
    membership_plan: str
    start_date: date
    end_date: date
