from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the terminal client.

    Values are loaded from environment variables and `.env`.

    Notes:
    - Navigation history lives in memory only; nothing here persists it.
    - The proxy address is only probed for the connection status screen.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging (diagnostic; the TUI owns the terminal, so logs go to file)
    UPSTREAM_LOG_DIR: Path = Field(default=Path("_logs"))
    UPSTREAM_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    UPSTREAM_LOG_BACKUP_COUNT: int = Field(default=14)

    # Navigation
    # 0 keeps every forward navigation; otherwise the oldest non-root views are evicted.
    UPSTREAM_NAV_MAX_DEPTH: int = Field(default=0)
    UPSTREAM_NAV_MAX_NOTIFY_DEPTH: int = Field(default=32)
    UPSTREAM_INITIAL_SCREEN: str = Field(default="main_menu")

    # Peer proxy
    UPSTREAM_PROXY_HOST: str = Field(default="127.0.0.1")
    UPSTREAM_PROXY_PORT: int = Field(default=17246)
    UPSTREAM_PROXY_TIMEOUT: float = Field(default=0.5)

    # Source control
    UPSTREAM_REPO_PATH: Path = Field(default=Path("."))
    UPSTREAM_COMMIT_LIMIT: int = Field(default=25)


def load_settings() -> Settings:
    s = Settings()
    if s.UPSTREAM_NAV_MAX_DEPTH < 0:
        s.UPSTREAM_NAV_MAX_DEPTH = 0
    elif s.UPSTREAM_NAV_MAX_DEPTH == 1:
        # Root plus one screen is the smallest usable history.
        s.UPSTREAM_NAV_MAX_DEPTH = 2
    if s.UPSTREAM_NAV_MAX_NOTIFY_DEPTH < 1:
        s.UPSTREAM_NAV_MAX_NOTIFY_DEPTH = 1
    if s.UPSTREAM_COMMIT_LIMIT < 0:
        s.UPSTREAM_COMMIT_LIMIT = 0
    return s
