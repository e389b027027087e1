from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import date, datetime

PaymentStatus = Literal["pending", "completed", "failed"]


class PaymentCreate(BaseModel):
    user_id: str
    membership_id: str
    amount: float = Field(..., gt=0)
    payment_date: date = Field(default_factory=date.today)
    status: PaymentStatus = "pending"
    payment_method: str = Field(..., min_length=1)
    transaction_id: Optional[str] = None


class PaymentStatusUpdate(BaseModel):
    status: PaymentStatus
    transaction_id: Optional[str] = None


class PaymentResponse(BaseModel):
    id: str
    user_id: str
    membership_id: str
    amount: float
    payment_date: date
    status: PaymentStatus
    payment_method: str
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PaymentSummaryItem(BaseModel):
    full_name: Optional[str] = None
    membership_plan: Optional[str] = None
    amount: float
    payment_date: date
    status: PaymentStatus


class PaymentSummaryResponse(BaseModel):
    start_date: date
    end_date: date
    total_completed: float
    payments: List[PaymentSummaryItem]
