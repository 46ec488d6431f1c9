# server/config.py

import os
import logging
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Storage
# -------------------------------

DATA_DIR = Path(os.getenv("DATA_DIR", "."))
USERS_FILE = DATA_DIR / os.getenv("USERS_FILE", "users.json")
POSTS_FILE = DATA_DIR / os.getenv("POSTS_FILE", "posts.json")


# -------------------------------
# Server
# -------------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))


def resolve_log_level(raw: str) -> str:
    """
    Canonical level name understood by both logging and uvicorn.
    Aliases such as WARN or FATAL map to WARNING and CRITICAL; unknown names fall back to INFO.
    """
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int) or level == logging.NOTSET:
        return "INFO"
    return logging.getLevelName(level)


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
