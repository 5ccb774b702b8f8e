# xfighter/config.py
"""Connection settings, read from the environment (a ``.env`` file is honoured)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.stockfighter.io/ob/api"
DEFAULT_API_KEY_HEADER = "X-Starfighter-Authorization"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    base_url: str
    api_key_header: str


def load_settings():
    """Read the settings at call time so environment changes are picked up."""
    return Settings(
        api_key=os.getenv("XFIGHTER_API_KEY") or None,
        base_url=os.getenv("XFIGHTER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        api_key_header=os.getenv("XFIGHTER_API_KEY_HEADER", DEFAULT_API_KEY_HEADER),
    )
