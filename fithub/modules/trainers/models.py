# Supabase table: trainers, view: trainer_clients
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

trainers:
- id: uuid (primary key, references users.id) - the trainer's profile shares this id
- specialization: text (not null)
- experience_years: integer (not null)
- certification: text (nullable)
- availability: json (nullable) - e.g. {"mon": ["07:00-12:00"]}
- created_at / updated_at: timestamptz

trainer_clients (view, active memberships only):
- trainer_id, trainer_name, client_name, membership_plan, start_date, end_date

trainer_availability_trigger (BEFORE INSERT ON user_memberships) rejects an
enrollment once the trainer has 10 active clients.
"""
