"""Runtime configuration: .env loading, store location, and logging."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

STORE_PATH_ENV = "CONTATOS_STORE_PATH"
LOG_LEVEL_ENV = "CONTATOS_LOG_LEVEL"

STORE_FILENAME = "contacts.json"
WINDOWS_APP_DIR = "Lista Contatos"
XDG_APP_DIR = "lista-contatos"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Repo root: from src/contatos/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def default_store_path(platform: str | None = None) -> Path:
    """Per-user data location of the contacts file."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        local = os.environ.get("LOCALAPPDATA", "").strip()
        base = Path(local) if local else Path.home() / "AppData" / "Local"
        return base / WINDOWS_APP_DIR / STORE_FILENAME
    xdg = os.environ.get("XDG_DATA_HOME", "").strip()
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / XDG_APP_DIR / STORE_FILENAME


def store_path() -> Path:
    """CONTATOS_STORE_PATH if set, else the platform default."""
    explicit = os.environ.get(STORE_PATH_ENV, "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return default_store_path()


def log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(format=LOG_FORMAT, level=log_level())
