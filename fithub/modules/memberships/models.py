# Supabase table: memberships
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

memberships:
- id: uuid (primary key, default: uuid_generate_v4())
- name: text (not null)
- description: text (nullable)
- duration_months: integer (not null)
- price: decimal(10,2) (not null)
- features: json (nullable) - list of feature strings shown on the plan card
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())
"""
