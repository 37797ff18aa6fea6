# pos_cli/core/session.py
import json
from typing import Optional

from . import config


def save_session(access_token: str, username: str, user_id: str) -> None:
    """
    Stores the access token and the logged-in account in SESSION_FILE.
    """
    config.APP_DIR.mkdir(parents=True, exist_ok=True)
    data = {"access_token": access_token, "username": username, "user_id": user_id}
    with open(config.SESSION_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f)


def load_session() -> Optional[dict]:
    """
    Reads the session file.
    Returns None if the file does not exist or is unreadable.
    """
    if not config.SESSION_FILE.exists():
        return None

    try:
        with open(config.SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return None
    if not data.get("access_token") or not data.get("username"):
        return None
    return data


def clear_session() -> None:
    if config.SESSION_FILE.exists():
        config.SESSION_FILE.unlink()


def is_logged_in() -> bool:
    return load_session() is not None
