from supabase import Client
from fithub.modules.payments.schemas import (
    PaymentCreate, PaymentStatusUpdate, PaymentResponse,
    PaymentSummaryItem, PaymentSummaryResponse
)
from fithub.core.db_errors import to_http_exception
from typing import List, Optional
from fastapi import HTTPException
from datetime import date, datetime, timezone
import logging

logger = logging.getLogger(__name__)


def sum_amounts(rows: List[dict]) -> float:
    """Sum decimal amounts as returned by PostgREST (numbers or numeric strings)"""
    return round(sum(float(row.get("amount") or 0) for row in rows), 2)


class PaymentService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_payment(self, payment_data: PaymentCreate) -> PaymentResponse:
        """Record a payment"""
        try:
            result = self.supabase.table("payments")\
                .insert(payment_data.model_dump(mode="json"))\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to record payment")
            logger.info(f"Recorded {payment_data.status} payment of {payment_data.amount} for user {payment_data.user_id}")
            return PaymentResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def list_payments(
        self,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[PaymentResponse]:
        """List payments, newest first"""
        try:
            query = self.supabase.table("payments").select("*")
            if user_id:
                query = query.eq("user_id", user_id)
            if status:
                query = query.eq("status", status)
            result = query.order("payment_date", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [PaymentResponse(**p) for p in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_status(self, payment_id: str, status_data: PaymentStatusUpdate) -> PaymentResponse:
        """Update payment status. Completing a payment reactivates the membership (database trigger)."""
        try:
            update_data = {
                "status": status_data.status,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            if status_data.transaction_id:
                update_data["transaction_id"] = status_data.transaction_id
            result = self.supabase.table("payments")\
                .update(update_data)\
                .eq("id", payment_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Payment not found")
            logger.info(f"Payment {payment_id} marked {status_data.status}")
            return PaymentResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def get_summary(self, start_date: date, end_date: date) -> PaymentSummaryResponse:
        """Payments in [start_date, end_date] with payer and plan names, newest first"""
        if start_date > end_date:
            raise HTTPException(status_code=400, detail="start_date must not be after end_date")
        try:
            result = self.supabase.table("payments")\
                .select("amount, payment_date, status, user_id, memberships(name)")\
                .gte("payment_date", start_date.isoformat())\
                .lte("payment_date", end_date.isoformat())\
                .order("payment_date", desc=True)\
                .execute()
            rows = result.data or []

            # payments -> profiles has no direct foreign key (both reference users), so resolve names separately
            user_ids = list({row["user_id"] for row in rows if row.get("user_id")})
            names = {}
            if user_ids:
                profiles = self.supabase.table("profiles")\
                    .select("id, full_name")\
                    .in_("id", user_ids)\
                    .execute()
                names = {p["id"]: p.get("full_name") for p in profiles.data or []}

            # Same rows as an inner join: payments without a payer profile or plan are left out
            rows = [
                row for row in rows
                if row.get("user_id") in names and (row.get("memberships") or {}).get("name")
            ]
            items = [
                PaymentSummaryItem(
                    full_name=names[row["user_id"]],
                    membership_plan=row["memberships"]["name"],
                    amount=float(row["amount"]),
                    payment_date=row["payment_date"],
                    status=row["status"],
                )
                for row in rows
            ]
            return PaymentSummaryResponse(
                start_date=start_date,
                end_date=end_date,
                total_completed=sum_amounts([row for row in rows if row.get("status") == "completed"]),
                payments=items,
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
