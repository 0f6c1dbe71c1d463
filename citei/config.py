"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database location (SQLite file used by the aiosqlite repository)
DATABASE_PATH = Path(os.environ.get("CITEI_DATABASE_PATH", str(BASE_DIR / "citei.db")))
DB_MAX_CONNECTIONS = int(os.environ.get("CITEI_DB_MAX_CONNECTIONS", "10"))

# Repository backend: "sqlite" or "memory"
REPOSITORY_BACKEND = os.environ.get("CITEI_REPOSITORY", "sqlite").lower()

# Base URL configuration (for running under a subpath like /citei)
BASE_URL = os.environ.get("CITEI_BASE_URL", "").strip("/")
ROOT_PATH = f"/{BASE_URL}" if BASE_URL else ""

# Logging
LOG_LEVEL = os.environ.get("CITEI_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("CITEI_LOG_FORMAT", "text")  # text or json

# Validation
MAX_FIELD_LENGTH = 255

# Server
HOST = os.environ.get("CITEI_HOST", "127.0.0.1")
PORT = int(os.environ.get("CITEI_PORT", "3000"))
