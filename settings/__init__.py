"""Application settings."""

import os
from pathlib import Path

# Data
DATA_DIR = Path(os.getenv("VOTES_DATA_DIR", "data"))

# Logging
LOG_DIR = Path(os.getenv("VOTES_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("VOTES_LOG_LEVEL", "INFO")

# API
API_HOST = os.getenv("VOTES_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("VOTES_API_PORT", "5000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("VOTES_CORS_ORIGINS", "*").split(",") if o.strip()]
