# Supabase table: payments
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

payments:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id)
- membership_id: uuid (foreign key to memberships.id)
- amount: decimal(10,2) (not null)
- payment_date: date (not null)
- status: payment_status enum (pending | completed | failed, default: pending)
- payment_method: text (not null)
- transaction_id: text (unique, nullable)
- created_at / updated_at: timestamptz

payment_status_trigger (AFTER UPDATE): when status becomes completed, the
matching user_memberships row (same user_id and membership_id) is set to active.
"""
