"""Storage location settings loaded from the environment."""
import os
from pathlib import Path
from threading import Lock

DEFAULT_VISITORS_DIR = "visitors"

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _load_env() -> None:
    """Load storage settings from .env file if present."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = Path(".env")
        if env_path.exists():
            for raw_line in env_path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                if key == "VISITORS_DIR" and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


def get_visitors_dir() -> Path:
    """
    Resolve the directory visitor files are stored in.

    Returns:
        Path from VISITORS_DIR, or "visitors" relative to the working
        directory when unset

    Behavior:
        - Reads .env once per process
        - Reads the environment on every call
    """
    _load_env()
    return Path(os.getenv("VISITORS_DIR") or DEFAULT_VISITORS_DIR)
