# Supabase Auth + tables: users, profiles
# This module uses Supabase's built-in authentication system
# Supabase Auth handles:
# - User registration (auth.users table)
# - User login and session management
# - JWT token generation and validation
# - Password hashing and security

"""
Registration additionally writes two rows owned by the gym schema:

users:
- id: uuid (primary key, references auth.users.id)
- role: user_role enum (admin | client | trainer, default: client)
- created_at / updated_at: timestamptz

profiles:
- id: uuid (primary key, references users.id)
- full_name: text (not null)
- email: text (not null, unique)
- phone, emergency_contact, medical_conditions: text (nullable)
- height, weight: decimal(5,2) (nullable)
- date_of_birth: date (nullable)

Changes to users are written to audit_logs by the user_changes_trigger.
"""
