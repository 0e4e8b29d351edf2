"""Runtime configuration read from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Credentials, presentation mode and storage locations."""

    session_id: str = ""
    keep_alive: str = ""
    compact: bool = False
    cache_dir: Path = Path(".euler-stats")
    cache_file: str = "cache.json"
    http_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    @property
    def cookie_header(self) -> str:
        return f"PHPSESSID={self.session_id}; keep_alive={self.keep_alive}"

    @property
    def has_credentials(self) -> bool:
        return bool(self.session_id.strip() and self.keep_alive.strip())


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """Build settings from the process environment and an optional ``.env`` file."""
    load_dotenv()

    return Settings(
        session_id=os.getenv("EULER_SESSION_ID", ""),
        keep_alive=os.getenv("EULER_KEEP_ALIVE", ""),
        compact=_env_flag("EULER_COMPACT"),
        cache_dir=Path(os.getenv("EULER_CACHE_DIR", ".euler-stats")),
        cache_file=os.getenv("EULER_CACHE_FILE", "cache.json"),
        http_timeout=float(os.getenv("EULER_HTTP_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
