# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references users.id)
- full_name: text (not null)
- email: text (not null, unique)
- phone: text (nullable)
- height: decimal(5,2) (nullable) - centimetres
- weight: decimal(5,2) (nullable) - kilograms
- date_of_birth: date (nullable)
- emergency_contact: text (nullable)
- medical_conditions: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())

RLS: members read/update their own row, admins have full access,
trainers can read profiles of clients assigned to them.
"""
