"""Runtime settings, read from CONFIGURATOR_* environment variables."""

from __future__ import annotations
import os
from pydantic import BaseModel


ENV_PREFIX = "CONFIGURATOR_"


class Settings(BaseModel):
    """Process-level settings for the API server and the session."""
    store_path: str | None = None   # JSON file for persistence; None = in memory
    history_limit: int = 50
    log_level: str = "INFO"
    log_file: str | None = None
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(values)
