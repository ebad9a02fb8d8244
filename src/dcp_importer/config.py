"""Settings loaded from the environment and an optional .env file."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from dcp_importer.domain.exceptions import ConfigurationError

DEFAULT_MBOX_PATH = "DCP.mbox"
DEFAULT_COLLECTION = "problem_descriptions"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Importer configuration."""

    mongo_uri: str
    mongo_db: str
    mbox_path: Path = Path(DEFAULT_MBOX_PATH)
    mongo_collection: str = DEFAULT_COLLECTION
    mongo_timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, *, load_env_file: bool = True
    ) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read instead of os.environ
            load_env_file: Whether to load a .env file into os.environ first

        Raises:
            ConfigurationError: If MONGO_URI or MONGO_DB is missing, or a value is invalid
        """
        if load_env_file:
            load_dotenv()
        if env is None:
            env = os.environ

        mongo_uri = _require(env, "MONGO_URI")
        mongo_db = _require(env, "MONGO_DB")

        raw_timeout = env.get("MONGO_TIMEOUT_MS", "").strip()
        timeout_ms = DEFAULT_TIMEOUT_MS
        if raw_timeout:
            try:
                timeout_ms = int(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"MONGO_TIMEOUT_MS must be an integer, got {raw_timeout!r}"
                ) from e
            if timeout_ms <= 0:
                raise ConfigurationError(f"MONGO_TIMEOUT_MS must be positive, got {timeout_ms}")

        log_level = env.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            mongo_uri=mongo_uri,
            mongo_db=mongo_db,
            mbox_path=Path(env.get("MBOX_PATH", "").strip() or DEFAULT_MBOX_PATH),
            mongo_collection=env.get("MONGO_COLLECTION", "").strip() or DEFAULT_COLLECTION,
            mongo_timeout_ms=timeout_ms,
            log_level=log_level,
        )


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} environment variable not set")
    return value
