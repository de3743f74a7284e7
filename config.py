# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = "Notebook Backend"

DEFAULT_MIME = "application/octet-stream"
DEFAULT_PROFILE_USER = "me"
UPLOADS_URL_PREFIX = "/uploads"


class Config:
    """Environment-backed settings, loaded with app.config.from_object."""

    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))

    UPLOAD_DIR = Path(os.environ.get("UPLOAD_DIR", "uploads"))
    PUBLIC_DIR = Path(os.environ.get("PUBLIC_DIR", "public"))
    DB_PATH = Path(os.environ.get("DB_PATH", "data.db"))

    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 512 * 1024 * 1024))  # 512 MiB
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
