# ABOUTME: Unit tests for CatalogConfig defaults and environment loading.
# ABOUTME: Validates env overrides, bad values, and the --db override helper.

from pathlib import Path

import pytest

from bookcatalog.config import (
    DEFAULT_DB_PATH,
    DEFAULT_LOCK_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    CatalogConfig,
)


class TestFromEnv:
    """Tests for CatalogConfig.from_env."""

    def test_defaults_when_env_empty(self) -> None:
        config = CatalogConfig.from_env({})
        assert config.db_path == DEFAULT_DB_PATH
        assert config.lock_timeout == DEFAULT_LOCK_TIMEOUT
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_reads_all_variables(self, tmp_path: Path) -> None:
        config = CatalogConfig.from_env(
            {
                "BOOKCATALOG_DB": str(tmp_path / "books.db"),
                "BOOKCATALOG_LOCK_TIMEOUT": "0.5",
                "BOOKCATALOG_LOG_LEVEL": "debug",
            }
        )
        assert config.db_path == tmp_path / "books.db"
        assert config.lock_timeout == 0.5
        assert config.log_level == "DEBUG"

    def test_non_numeric_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="BOOKCATALOG_LOCK_TIMEOUT"):
            CatalogConfig.from_env({"BOOKCATALOG_LOCK_TIMEOUT": "soon"})

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            CatalogConfig.from_env({"BOOKCATALOG_LOCK_TIMEOUT": "-1"})

    def test_reads_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BOOKCATALOG_DB", str(tmp_path / "env.db"))
        assert CatalogConfig.from_env().db_path == tmp_path / "env.db"


class TestWithDbPath:
    """Tests for CatalogConfig.with_db_path."""

    def test_none_returns_same_config(self) -> None:
        config = CatalogConfig()
        assert config.with_db_path(None) is config

    def test_override_keeps_other_settings(self, tmp_path: Path) -> None:
        config = CatalogConfig(lock_timeout=1.5)
        overridden = config.with_db_path(tmp_path / "other.db")
        assert overridden.db_path == tmp_path / "other.db"
        assert overridden.lock_timeout == 1.5
        assert config.db_path == DEFAULT_DB_PATH
