# Supabase table: user_memberships, views: active_memberships, upcoming_renewals
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

user_memberships:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id)
- membership_id: uuid (foreign key to memberships.id)
- trainer_id: uuid (foreign key to trainers.id, nullable)
- start_date: date (not null)
- end_date: date (not null)
- status: membership_status enum (active | expired | cancelled, default: active)
- created_at / updated_at: timestamptz

active_memberships (view): id, user_name, membership_name, start_date, end_date, trainer_name
upcoming_renewals (view): full_name, email, membership_plan, end_date, renewal_amount
    - active memberships ending between today and today + 30 days

Triggers:
- trainer_availability_trigger rejects inserts for trainers with 10 active clients
- payment_status_trigger sets status back to active when a matching payment completes
"""
