"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("AIFANS_DB_PATH", "aifans.duckdb")

# Logging
LOG_DIR = Path(os.getenv("AIFANS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("AIFANS_LOG_LEVEL", "INFO")

# Sensitive words
WORD_CACHE_TTL_SECONDS = int(os.getenv("AIFANS_WORD_CACHE_TTL", "3600"))
