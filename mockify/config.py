"""Configuration: env, data directory, API host/port."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of mockify package)
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("MOCKIFY_DATA_DIR", str(BASE_DIR / "data")))

# Collection document names (<DATA_DIR>/<name>.json)
TRACKS_COLLECTION = "tracks"
PLAYLISTS_COLLECTION = "playlists"

# API
API_HOST = os.getenv("MOCKIFY_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("MOCKIFY_API_PORT", "3000"))
API_VERSION = "1.0.0"

LOG_LEVEL = os.getenv("MOCKIFY_LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("MOCKIFY_CORS_ORIGINS", "*").split(",") if o.strip()]


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
