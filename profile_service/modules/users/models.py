# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Rows are created by the registration flow, not by this service

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, references auth.users.id)
- name: text (not null)
- email: text (unique, not null)
- avatar: text (nullable) - gravatar or uploaded image URL
- created_at: timestamp (default: now())
"""
