"""Note and note category models."""

NOTE_CATEGORY_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_note_category START 1"
NOTE_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_note START 1"

NOTE_CATEGORY_DDL = """
CREATE TABLE IF NOT EXISTS note_category (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_note_category'),
    name VARCHAR NOT NULL UNIQUE
)
"""

# content holds plain text or a JSON document from the rich-text editor
NOTE_DDL = """
CREATE TABLE IF NOT EXISTS note (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_note'),
    user_id INTEGER NOT NULL,
    category_id INTEGER NOT NULL,
    title VARCHAR NOT NULL,
    content VARCHAR,
    cover_image_url VARCHAR,
    status VARCHAR NOT NULL DEFAULT 'VISIBLE',
    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""
