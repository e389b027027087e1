from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Any
from datetime import datetime
from fithub.core.validation import reject_nulls


class MembershipCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    duration_months: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    features: Optional[List[Any]] = None


class MembershipUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    duration_months: Optional[int] = Field(None, ge=1)
    price: Optional[float] = Field(None, ge=0)
    features: Optional[List[Any]] = None

    @model_validator(mode="before")
    @classmethod
    def not_null_columns(cls, data):
        return reject_nulls(data, ("name", "duration_months", "price"))


class MembershipResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    duration_months: int
    price: float
    features: Optional[List[Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
