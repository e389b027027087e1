from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import date, datetime

MembershipStatus = Literal["active", "expired", "cancelled"]


class EnrollmentCreate(BaseModel):
    user_id: str
    membership_id: str
    trainer_id: Optional[str] = None
    start_date: date = Field(default_factory=date.today)
    payment_method: str = "pending"


class UserMembershipResponse(BaseModel):
    id: str
    user_id: str
    membership_id: str
    trainer_id: Optional[str] = None
    start_date: date
    end_date: date
    status: MembershipStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EnrollmentResponse(BaseModel):
    membership: UserMembershipResponse
    payment_id: Optional[str] = None
    amount_due: float


class ExpireResponse(BaseModel):
    expired: int
    checked_on: date


class RenewalResponse(BaseModel):
    full_name: str
    email: str
    membership_plan: str
    end_date: date
    renewal_amount: float
