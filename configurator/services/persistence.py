"""Persistence of the live configuration in a key-value store.

Failures here never stop the session: they are logged and the session
keeps working in memory.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from configurator.models import ContainerConfig, DEFAULT_CONFIG, merge_over_defaults

logger = logging.getLogger(__name__)


STORAGE_KEY = "dust_container_config_v1"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-local store, used by default and in tests."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """All keys kept in one JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class ConfigRepository:
    """Loads and saves the session configuration under STORAGE_KEY."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> ContainerConfig:
        """Stored snapshot merged over defaults, or the defaults on any failure."""
        try:
            raw = self.store.get(self.key)
            if raw:
                data = json.loads(raw)
                if not isinstance(data, dict):
                    raise ValueError("stored configuration is not an object")
                config = merge_over_defaults(data)
                logger.info("Loaded previous config.")
                return config
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Failed to load stored config: %s", e)
        logger.info("Using default config.")
        return DEFAULT_CONFIG

    def save(self, config: ContainerConfig) -> bool:
        try:
            self.store.set(self.key, config.model_dump_json())
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save config: %s", e)
            return False
        return True
