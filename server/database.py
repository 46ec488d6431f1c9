# server/database.py

import json
import logging
from pathlib import Path

import config


logger = logging.getLogger(__name__)


def _read_collection(path: Path) -> list[dict]:
    """
    Loads a JSON array from disk.
    A missing file is an empty collection; so is a malformed one, but that case is logged.
    """
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, treating it as empty: %s", path, e)
        return []

    if not isinstance(data, list):
        logger.warning("%s does not hold a JSON array, treating it as empty", path)
        return []
    return data


def _write_collection(path: Path, items: list[dict]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(items, f, indent=2, ensure_ascii=False)
    logger.debug("Wrote %d records to %s", len(items), path)


def read_users() -> list[dict]:
    return _read_collection(config.USERS_FILE)


def write_users(users: list[dict]):
    _write_collection(config.USERS_FILE, users)


def read_posts() -> list[dict]:
    return _read_collection(config.POSTS_FILE)


def write_posts(posts: list[dict]):
    _write_collection(config.POSTS_FILE, posts)
