"""Resource (curated learning material) model."""

RESOURCE_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_resource START 1"

RESOURCE_DDL = """
CREATE TABLE IF NOT EXISTS resource (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_resource'),
    user_id INTEGER NOT NULL,
    category_id INTEGER,
    title VARCHAR NOT NULL,
    content VARCHAR,
    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""
