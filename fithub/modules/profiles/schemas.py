from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


class ProfileUpdate(BaseModel):
    full_name: str = Field(..., min_length=2)
    phone: Optional[str] = None
    height: Optional[float] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    emergency_contact: Optional[str] = None
    medical_conditions: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    full_name: str
    email: str
    phone: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    medical_conditions: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
