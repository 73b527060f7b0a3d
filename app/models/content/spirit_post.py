"""Spirit post (request board) models - posts, claims and claim messages."""

SPIRIT_POST_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_spirit_post START 1"
SPIRIT_POST_CLAIM_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_spirit_post_claim START 1"
SPIRIT_POST_MESSAGE_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_spirit_post_message START 1"

SPIRIT_POST_DDL = """
CREATE TABLE IF NOT EXISTS spirit_post (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_spirit_post'),
    user_id INTEGER NOT NULL,
    title VARCHAR NOT NULL,
    content VARCHAR NOT NULL,
    created_at TIMESTAMP DEFAULT current_timestamp,
    updated_at TIMESTAMP DEFAULT current_timestamp
)
"""

SPIRIT_POST_CLAIM_DDL = """
CREATE TABLE IF NOT EXISTS spirit_post_claim (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_spirit_post_claim'),
    post_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    is_completed BOOLEAN DEFAULT FALSE,
    created_at TIMESTAMP DEFAULT current_timestamp,
    UNIQUE (post_id, user_id)
)
"""

SPIRIT_POST_MESSAGE_DDL = """
CREATE TABLE IF NOT EXISTS spirit_post_message (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_spirit_post_message'),
    post_id INTEGER NOT NULL,
    sender_id INTEGER NOT NULL,
    receiver_id INTEGER NOT NULL,
    content VARCHAR NOT NULL,
    is_read BOOLEAN DEFAULT FALSE,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""
