"""Creator profile model - at most one per user."""

CREATOR_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_creator START 1"

CREATOR_DDL = """
CREATE TABLE IF NOT EXISTS creator (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_creator'),
    user_id INTEGER NOT NULL UNIQUE,
    nickname VARCHAR NOT NULL,
    bio VARCHAR,
    expertise VARCHAR,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""
