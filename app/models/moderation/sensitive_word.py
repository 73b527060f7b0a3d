"""Sensitive word (banned word) model."""

SENSITIVE_WORD_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_sensitive_word START 1"

SENSITIVE_WORD_DDL = """
CREATE TABLE IF NOT EXISTS sensitive_word (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_sensitive_word'),
    word VARCHAR NOT NULL UNIQUE,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""
