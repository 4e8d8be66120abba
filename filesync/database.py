"""SQLite storage for the transfer history."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DATABASE_NAME = "filesync.db"

_MIGRATION_TABLE = "_migrations"
_MIGRATION_KINDS = ("up", "down")


class StartupError(Exception):
    """Raised when the application cannot prepare its storage."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Process failed due to {reason}")
        self.reason = reason


@dataclass(frozen=True)
class Migration:
    """One versioned schema change."""

    version: int
    description: str
    sql: str
    kind: str = "up"

    def __post_init__(self) -> None:
        if self.kind not in _MIGRATION_KINDS:
            raise ValueError(f"unknown migration kind {self.kind!r}")


MIGRATIONS: tuple[Migration, ...] = (
    Migration(
        version=1,
        description="create_transfer_history_table",
        sql=(
            "CREATE TABLE transfer_history (id TEXT PRIMARY KEY, file_name TEXT, "
            "sender TEXT, receiver TEXT,  file_size VARCHAR, date TEXT, status VARCHAR );"
        ),
    ),
)


def _applied_versions(connection: sqlite3.Connection) -> set[int]:
    connection.execute(
        f"CREATE TABLE IF NOT EXISTS {_MIGRATION_TABLE} "
        "(version INTEGER PRIMARY KEY, description TEXT NOT NULL)"
    )
    return {row[0] for row in connection.execute(f"SELECT version FROM {_MIGRATION_TABLE}")}


def apply_migrations(
    connection: sqlite3.Connection, migrations: Iterable[Migration]
) -> list[int]:
    """Apply pending ``up`` migrations in version order; return the versions applied."""
    pending = sorted((m for m in migrations if m.kind == "up"), key=lambda m: m.version)
    versions = [m.version for m in pending]
    if len(versions) != len(set(versions)):
        raise StartupError("duplicate migration versions")

    applied: list[int] = []
    try:
        done = _applied_versions(connection)
        connection.commit()
        for migration in pending:
            if migration.version in done:
                continue
            with connection:
                connection.executescript(
                    "BEGIN;\n" + migration.sql + "\nCOMMIT;"
                )
                connection.execute(
                    f"INSERT INTO {_MIGRATION_TABLE} (version, description) VALUES (?, ?)",
                    (migration.version, migration.description),
                )
            applied.append(migration.version)
    except sqlite3.Error as error:
        raise StartupError(str(error)) from error
    return applied


def open_database(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open (creating if needed) the database at ``path`` and bring its schema up to date."""
    db_path = Path(path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise StartupError(str(error)) from error

    try:
        connection = sqlite3.connect(db_path)
        connection.execute("PRAGMA journal_mode=WAL")
    except sqlite3.Error as error:
        raise StartupError(str(error)) from error

    try:
        apply_migrations(connection, MIGRATIONS)
    except StartupError:
        connection.close()
        raise
    return connection