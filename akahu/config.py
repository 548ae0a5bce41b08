from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.akahu.io/v1/"
DEFAULT_OAUTH_URL = "https://oauth.akahu.io/"
DEFAULT_TIMEOUT_SECONDS = 20.0


def _load_env_file(env_file: Optional[Path] = None) -> None:
    # Variables already present in the environment win over the .env file.
    load_dotenv(env_file or Path.cwd() / ".env")


class Settings:
    """Client settings resolved from environment variables."""

    def __init__(self, env_file: Optional[Path] = None) -> None:
        _load_env_file(env_file)
        self.app_id_token: Optional[str] = os.getenv("AKAHU_APP_TOKEN")
        self.app_secret: Optional[str] = os.getenv("AKAHU_APP_SECRET")
        self.redirect_uri: str = os.getenv("AKAHU_REDIRECT_URI", "")
        self.base_url: str = os.getenv("AKAHU_BASE_URL", DEFAULT_BASE_URL)
        self.oauth_url: str = os.getenv("AKAHU_OAUTH_URL", DEFAULT_OAUTH_URL)
        self.timeout: float = float(os.getenv("AKAHU_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
        self.user_access_token: Optional[str] = os.getenv("AKAHU_USER_TOKEN")
