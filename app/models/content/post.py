"""Post (image/video work) model."""

POST_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_post START 1"

POST_DDL = """
CREATE TABLE IF NOT EXISTS post (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_post'),
    user_id INTEGER NOT NULL,
    type VARCHAR NOT NULL,
    title VARCHAR,
    prompt VARCHAR NOT NULL,
    file_url VARCHAR,
    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""

POST_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_post_user ON post(user_id)",
]
