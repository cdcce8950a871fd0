# ABOUTME: SQLite database connection management for the book catalog.
# ABOUTME: Opens or creates the database, applies schema and migrations, configures transactions.

import logging
import sqlite3
from pathlib import Path

from bookcatalog.config import DEFAULT_DB_PATH, DEFAULT_LOCK_TIMEOUT, CatalogConfig
from bookcatalog.db.schema import MIGRATIONS, SCHEMA_V1
from bookcatalog.db.transaction import translate_errors

logger = logging.getLogger(__name__)


def schema_version(conn: sqlite3.Connection) -> int:
    """Return the catalog's schema version, or 0 for a database with no catalog yet."""
    has_version_table = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_version'"
    ).fetchone()
    if has_version_table is None:
        return 0
    row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    return row[0] or 0


def _upgrade(conn: sqlite3.Connection, db_path: Path) -> None:
    """Bring the catalog schema up to the newest version."""
    current = schema_version(conn)
    if current == 0:
        logger.info("Creating catalog schema in %s", db_path)
        conn.executescript(SCHEMA_V1)
        current = 1

    pending = [(version, sql) for version, sql in MIGRATIONS if version > current]
    for version, sql in pending:
        logger.info("Migrating catalog %s from version %d to %d", db_path, current, version)
        conn.executescript(sql)
        current = version


def open_catalog(
    path: Path | None = None,
    *,
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
) -> sqlite3.Connection:
    """Open or create the catalog database.

    The connection runs with isolation_level=None: every statement commits on
    its own unless a Transaction or RecordLock has explicitly begun one.
    lock_timeout becomes SQLite's busy timeout, i.e. how long a writer waits
    for another session's lock before the store reports the database locked.

    Args:
        path: Path to the database file. Defaults to ~/.bookcatalog/catalog.db.
        lock_timeout: Seconds to wait on a locked database.

    Returns:
        A configured sqlite3.Connection.

    Raises:
        StorageError: If the file is not a usable SQLite database.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with translate_errors():
        conn = sqlite3.connect(str(db_path), timeout=lock_timeout, isolation_level=None)
    try:
        with translate_errors():
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA foreign_keys=ON")
            _upgrade(conn, db_path)
    except BaseException:
        conn.close()
        raise

    return conn


def connect(config: CatalogConfig) -> sqlite3.Connection:
    """Open the catalog described by a CatalogConfig."""
    return open_catalog(config.db_path, lock_timeout=config.lock_timeout)
