# Supabase tables: workouts, user_workouts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

workouts:
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- difficulty_level: integer (check between 1 and 5)
- duration_minutes: integer (not null)
- exercises: json (not null) - e.g. [{"name": "Squat", "sets": 3, "reps": 10}]
- created_at / updated_at: timestamptz

user_workouts:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id)
- workout_id: uuid (foreign key to workouts.id)
- trainer_id: uuid (foreign key to trainers.id, nullable)
- assigned_date: date (not null)
- completed_date: date (nullable) - null while the workout is pending
- notes: text (nullable)
- created_at / updated_at: timestamptz
"""
