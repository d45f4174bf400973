"""Database schema definitions for the SQLite store."""

from __future__ import annotations

SCHEMA_VERSION = 1

CREATE_SUBJECTS_TABLE = """
CREATE TABLE IF NOT EXISTS subjects (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    icon TEXT NOT NULL,
    created_at DATETIME NOT NULL
)
"""

# subjects holds a JSON array of subject names; [] means "all subjects"
CREATE_QUOTES_TABLE = """
CREATE TABLE IF NOT EXISTS quotes (
    id TEXT PRIMARY KEY,
    text TEXT NOT NULL,
    source TEXT NOT NULL DEFAULT '',
    subjects TEXT NOT NULL DEFAULT '[]',
    created_at DATETIME NOT NULL
)
"""

CREATE_POEMS_TABLE = """
CREATE TABLE IF NOT EXISTS poems (
    id TEXT PRIMARY KEY,
    old_english TEXT NOT NULL,
    modern_english TEXT NOT NULL,
    source TEXT NOT NULL,
    line_ref TEXT NOT NULL DEFAULT '',
    created_at DATETIME NOT NULL
)
"""

CREATE_SESSIONS_TABLE = """
CREATE TABLE IF NOT EXISTS sessions (
    id TEXT PRIMARY KEY,
    subject_id TEXT NOT NULL,
    subject_name TEXT NOT NULL,
    duration INTEGER NOT NULL,
    status TEXT NOT NULL CHECK (status IN ('completed', 'abandoned')),
    started_at DATETIME NOT NULL,
    completed_at DATETIME NOT NULL
)
"""

CREATE_SCHEMA_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    applied_at DATETIME NOT NULL
)
"""

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_subjects_name ON subjects(name)",
    "CREATE INDEX IF NOT EXISTS idx_poems_ref ON poems(source, line_ref)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_status ON sessions(status)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_completed ON sessions(completed_at)",
]

ALL_TABLES = [
    CREATE_SCHEMA_VERSION_TABLE,
    CREATE_SUBJECTS_TABLE,
    CREATE_QUOTES_TABLE,
    CREATE_POEMS_TABLE,
    CREATE_SESSIONS_TABLE,
]
