"""Central settings for the message board, resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent.parent

# Defaults
MAX_MSG = 10
DATA_FILENAME = "mydata.txt"
DEFAULT_PORT = 3000
DEFAULT_TITLE = "Index"
DEFAULT_PROMPT = "Please write some message..."


def _int_from_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {key}: {raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Keep every path and tunable in one place so tests can build
    an app against a temporary data file.
    """

    data_filename: str = DATA_FILENAME
    max_messages: int = MAX_MSG
    template_dir: Path = PACKAGE_ROOT / "templates"
    title: str = DEFAULT_TITLE
    prompt: str = DEFAULT_PROMPT
    unknown_path_status: int = 200
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        template_dir = env.get("BOARD_TEMPLATE_DIR")
        return cls(
            data_filename=env.get("BOARD_DATA_FILE", DATA_FILENAME),
            max_messages=max(1, _int_from_env(env, "BOARD_MAX_MSG", MAX_MSG)),
            template_dir=Path(template_dir) if template_dir else PACKAGE_ROOT / "templates",
            title=env.get("BOARD_TITLE", DEFAULT_TITLE),
            prompt=env.get("BOARD_PROMPT", DEFAULT_PROMPT),
            unknown_path_status=_int_from_env(env, "BOARD_UNKNOWN_PATH_STATUS", 200),
            host=env.get("HOST", "127.0.0.1"),
            port=_int_from_env(env, "PORT", DEFAULT_PORT),
            debug=env.get("FLASK_DEBUG", "false").lower() == "true",
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process settings, pulling a local .env file in first."""
    load_dotenv()
    return Settings.from_env()
