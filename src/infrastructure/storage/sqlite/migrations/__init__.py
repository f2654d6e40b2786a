"""Database migrations module."""

from src.infrastructure.storage.sqlite.migrations.migrator import (
    MIGRATIONS_DIR,
    PLANNING_TABLES,
    SchemaScript,
    applied_versions,
    get_current_version,
    missing_tables,
    run_migrations,
    schema_scripts,
    schema_status,
)

__all__ = [
    "MIGRATIONS_DIR",
    "PLANNING_TABLES",
    "SchemaScript",
    "applied_versions",
    "get_current_version",
    "missing_tables",
    "run_migrations",
    "schema_scripts",
    "schema_status",
]
