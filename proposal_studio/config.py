from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class StorageMode(str, Enum):
    """Which backing store holds proposals, account executives and the prompt."""

    DEMO = "demo"
    LOCAL = "local"
    REMOTE = "remote"


class Settings(BaseSettings):
    """
    Application settings.
    Values come from environment variables (or the .env file).
    """

    # Storage: the mode is chosen once at start-up
    storage_mode: StorageMode = StorageMode.DEMO
    remote_base_url: str = ""  # e.g. https://proposals.internal/api/v1
    remote_timeout_seconds: Optional[float] = 30.0  # transport-level only
    local_store_path: str = "data/store"

    # Saved proposals older than this are swept on the next listing
    proposal_retention_days: int = 30

    # Generation: Claude CLI
    claude_model: str = "claude-sonnet-4-20250514"
    claude_timeout_seconds: int = 300

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def resolved_storage_mode(self) -> StorageMode:
        """
        Storage mode actually used.
        Remote without a base URL is incomplete configuration and behaves like demo.
        """
        if self.storage_mode == StorageMode.REMOTE and not self.remote_base_url.strip():
            return StorageMode.DEMO
        return self.storage_mode


@lru_cache()
def get_settings() -> Settings:
    """
    Return the cached settings.
    @lru_cache keeps one instance so .env is read only once.
    """
    return Settings()
