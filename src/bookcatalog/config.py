# ABOUTME: Process-wide configuration for the book catalog, built once at startup.
# ABOUTME: Reads defaults from BOOKCATALOG_* environment variables; passed explicitly to components.

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_DB_PATH = Path.home() / ".bookcatalog" / "catalog.db"
DEFAULT_LOCK_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"

ENV_DB_PATH = "BOOKCATALOG_DB"
ENV_LOCK_TIMEOUT = "BOOKCATALOG_LOCK_TIMEOUT"
ENV_LOG_LEVEL = "BOOKCATALOG_LOG_LEVEL"


@dataclass(frozen=True)
class CatalogConfig:
    """Settings shared by every component that touches the catalog database.

    Attributes:
        db_path: Location of the SQLite database file.
        lock_timeout: Seconds to wait for another session's write lock
            before giving up with LockTimeoutError.
        log_level: Name of the logging level for the CLI's log handler.
    """

    db_path: Path = DEFAULT_DB_PATH
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CatalogConfig":
        """Build a config from environment variables, falling back to defaults.

        Raises:
            ValueError: If BOOKCATALOG_LOCK_TIMEOUT is not a non-negative number.
        """
        env = os.environ if environ is None else environ

        db_path = Path(env[ENV_DB_PATH]).expanduser() if env.get(ENV_DB_PATH) else DEFAULT_DB_PATH

        raw_timeout = env.get(ENV_LOCK_TIMEOUT)
        lock_timeout = DEFAULT_LOCK_TIMEOUT
        if raw_timeout:
            try:
                lock_timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(
                    f"{ENV_LOCK_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                ) from exc
            if lock_timeout < 0:
                raise ValueError(f"{ENV_LOCK_TIMEOUT} must not be negative, got {raw_timeout!r}")

        log_level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()

        return cls(db_path=db_path, lock_timeout=lock_timeout, log_level=log_level)

    def with_db_path(self, db_path: Path | None) -> "CatalogConfig":
        """Return a copy pointing at db_path, or self when db_path is None."""
        if db_path is None:
            return self
        return replace(self, db_path=db_path)
