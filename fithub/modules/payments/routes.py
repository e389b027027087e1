from fastapi import APIRouter, Depends
from fithub.modules.payments.schemas import (
    PaymentCreate, PaymentStatusUpdate, PaymentResponse,
    PaymentSummaryResponse, PaymentStatus
)
from fithub.modules.payments.service import PaymentService
from fithub.core.dependencies import require_permission, is_admin, get_user_supabase
from supabase import Client
from typing import List, Optional, Dict
from datetime import date

router = APIRouter(prefix="/payments", tags=["payments"])


def get_payment_service(supabase: Client = Depends(get_user_supabase)) -> PaymentService:
    return PaymentService(supabase)


@router.get("", response_model=List[PaymentResponse])
async def list_payments(
    status: Optional[PaymentStatus] = None,
    limit: int = 50,
    offset: int = 0,
    member: Dict = Depends(require_permission("payments:read")),
    service: PaymentService = Depends(get_payment_service)
):
    """List payments. Non-admins only see their own."""
    user_id = None if is_admin(member) else member["id"]
    return service.list_payments(user_id=user_id, status=status, limit=limit, offset=offset)


@router.post("", response_model=PaymentResponse, status_code=201)
async def create_payment(
    payment_data: PaymentCreate,
    member: Dict = Depends(require_permission("payments:create")),
    service: PaymentService = Depends(get_payment_service)
):
    """Record a payment"""
    return service.create_payment(payment_data)


@router.get("/summary", response_model=PaymentSummaryResponse)
async def payment_summary(
    start_date: date,
    end_date: date,
    member: Dict = Depends(require_permission("payments:summary")),
    service: PaymentService = Depends(get_payment_service)
):
    """Payment report for a date range"""
    return service.get_summary(start_date, end_date)


@router.patch("/{payment_id}/status", response_model=PaymentResponse)
async def update_payment_status(
    payment_id: str,
    status_data: PaymentStatusUpdate,
    member: Dict = Depends(require_permission("payments:update")),
    service: PaymentService = Depends(get_payment_service)
):
    """Update payment status"""
    return service.update_status(payment_id, status_data)
