"""Direct user-to-user message model."""

USER_MESSAGE_SEQ = "CREATE SEQUENCE IF NOT EXISTS seq_user_message START 1"

USER_MESSAGE_DDL = """
CREATE TABLE IF NOT EXISTS user_message (
    id INTEGER PRIMARY KEY DEFAULT nextval('seq_user_message'),
    sender_id INTEGER NOT NULL,
    receiver_id INTEGER NOT NULL,
    content VARCHAR NOT NULL,
    is_read BOOLEAN DEFAULT FALSE,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

USER_MESSAGE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_user_message_receiver ON user_message(receiver_id)",
]
