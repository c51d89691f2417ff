# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to users.id on delete cascade, not null)
- company: text (nullable)
- website: text (nullable)
- location: text (nullable)
- bio: text (nullable)
- status: text (nullable)
- githubusername: text (nullable)
- skills: jsonb (not null, default: '[]') - array of strings
- social: jsonb (nullable) - {youtube, twitter, facebook, linkedin, instagram}
- experience: jsonb (not null, default: '[]') - newest first
    [{id, title, company, location, from, to, current, description}]
- education: jsonb (not null, default: '[]') - newest first
    [{id, school, degree, fieldofstudy, from, to, current, description}]
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
- unique constraint on (user_id)

The unique constraint is what keeps one profile per user: writes go through
upsert(..., on_conflict="user_id") so two concurrent creates collapse into one row.
Reads embed the owner with select("*, user:users(id, name, avatar)").
"""
