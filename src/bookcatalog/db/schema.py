# ABOUTME: SQL DDL statements for the book catalog database schema.
# ABOUTME: Defines Books, Publishers, book_audit_trail, and versioned migrations.

# Timestamps are ISO-8601 text with millisecond precision, assigned by SQLite.
NOW = "strftime('%Y-%m-%dT%H:%M:%f', 'now')"

SCHEMA_V1 = f"""
CREATE TABLE Publishers (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    name  TEXT NOT NULL
);

-- The Unknown publisher is the default for books with no assigned publisher
INSERT INTO Publishers (id, name) VALUES (1, 'Unknown');

CREATE TABLE Books (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT NOT NULL,
    summary         TEXT,
    year_published  INTEGER NOT NULL DEFAULT 0,
    publisher_id    INTEGER NOT NULL DEFAULT 1 REFERENCES Publishers(id),
    isbn            TEXT,
    date_added      TEXT NOT NULL DEFAULT ({NOW}),
    last_modified   TEXT NOT NULL DEFAULT ({NOW})
);

-- Append-only change history; rows go away only with their book
CREATE TABLE book_audit_trail (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    book_id    INTEGER NOT NULL REFERENCES Books(id) ON DELETE CASCADE,
    timestamp  TEXT NOT NULL DEFAULT ({NOW}),
    entry_msg  TEXT NOT NULL
);

CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT ({NOW})
);

INSERT INTO schema_version (version) VALUES (1);
"""

SCHEMA_V2 = """
CREATE INDEX idx_audit_book ON book_audit_trail(book_id, timestamp);
CREATE INDEX idx_books_isbn ON Books(isbn) WHERE isbn IS NOT NULL AND isbn != '';
CREATE INDEX idx_books_publisher ON Books(publisher_id);

INSERT INTO schema_version (version) VALUES (2);
"""

MIGRATIONS: list[tuple[int, str]] = [
    (2, SCHEMA_V2),
]

LATEST_VERSION = MIGRATIONS[-1][0]
