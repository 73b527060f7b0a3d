"""Screening (admin-uploaded showcase video) models - screenings and their comments."""

SCREENING_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_screening START 1"
SCREENING_COMMENT_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_screening_comment START 1"

SCREENING_DDL = """
CREATE TABLE IF NOT EXISTS screening (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_screening'),
    admin_uploader_id INTEGER NOT NULL,
    creator_id INTEGER,
    title VARCHAR NOT NULL,
    description VARCHAR,
    video_url VARCHAR NOT NULL,
    thumbnail_url VARCHAR,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

SCREENING_COMMENT_DDL = """
CREATE TABLE IF NOT EXISTS screening_comment (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_screening_comment'),
    screening_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    content VARCHAR NOT NULL,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

SCREENING_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_screening_comment_screening ON screening_comment(screening_id)",
]
