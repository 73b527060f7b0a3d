"""Platform user model."""

USER_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_app_user START 1"

USER_DDL = """
CREATE TABLE IF NOT EXISTS app_user (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_app_user'),
    username VARCHAR NOT NULL UNIQUE,
    nickname VARCHAR,
    role VARCHAR NOT NULL DEFAULT 'NORMAL',
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""
