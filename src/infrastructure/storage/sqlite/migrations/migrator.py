"""
Schema setup for the production planning database.

The planner only reads its tables. This module creates them from the
``vNNN_name.sql`` scripts next to it and records each applied script in
``schema_migrations`` so restarts skip it.
"""

import argparse
import asyncio
import hashlib
import re
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings
from src.core.exceptions import DatabaseError

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

_SCRIPT_NAME = re.compile(r"v(\d+)_(\w+)\.sql")

PLANNING_TABLES = (
    "products",
    "raw_materials",
    "product_recipes",
    "bottle_types",
    "sellable_products",
    "sellable_product_variations",
    "customers",
    "orders",
    "order_items",
    "schema_migrations",
)


@dataclass(frozen=True)
class SchemaScript:
    """One versioned schema script."""

    version: str
    name: str
    path: Path

    @property
    def sql(self) -> str:
        return self.path.read_text(encoding="utf-8")

    @property
    def checksum(self) -> str:
        return hashlib.sha256(self.sql.encode()).hexdigest()[:16]


def schema_scripts(directory: Path | None = None) -> list[SchemaScript]:
    """List schema scripts ordered by version, skipping misnamed files."""
    scripts = []
    for path in (directory or MIGRATIONS_DIR).glob("*.sql"):
        match = _SCRIPT_NAME.fullmatch(path.name)
        if match is None:
            logger.warning("schema_script_ignored", path=str(path))
            continue
        scripts.append(SchemaScript(version=match.group(1), name=match.group(2), path=path))
    return sorted(scripts, key=lambda script: int(script.version))


async def applied_versions(conn: aiosqlite.Connection) -> dict[str, str]:
    """Recorded script versions mapped to their checksums."""
    try:
        cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    except aiosqlite.OperationalError:
        return {}
    return {version: checksum for version, checksum in await cursor.fetchall()}


async def get_current_version(conn: aiosqlite.Connection) -> str | None:
    """Highest recorded schema version, or None on a blank database."""
    versions = await applied_versions(conn)
    return max(versions, key=int) if versions else None


async def _apply(conn: aiosqlite.Connection, script: SchemaScript) -> None:
    started = time.perf_counter()
    try:
        await conn.executescript(script.sql)
        await conn.execute(
            "INSERT INTO schema_migrations (version, name, checksum, execution_time_ms) "
            "VALUES (?, ?, ?, ?)",
            (
                script.version,
                script.name,
                script.checksum,
                int((time.perf_counter() - started) * 1000),
            ),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        raise DatabaseError(f"apply_schema_v{script.version}", str(e)) from e


async def run_migrations(
    db_path: Path | None = None,
    directory: Path | None = None,
) -> list[str]:
    """
    Apply every schema script not yet recorded.

    A recorded script whose file has since changed is left alone and
    logged; its tables are already in place.

    Returns:
        Versions applied by this call, in order.

    Raises:
        DatabaseError: If a script fails. Later scripts are not attempted.
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    applied: list[str] = []
    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA foreign_keys=ON")
        recorded = await applied_versions(conn)

        for script in schema_scripts(directory):
            if script.version in recorded:
                if recorded[script.version] != script.checksum:
                    logger.warning("schema_script_changed", version=script.version)
                continue
            await _apply(conn, script)
            logger.info("schema_applied", version=script.version, name=script.name)
            applied.append(script.version)

    return applied


async def schema_status(db_path: Path | None = None) -> dict:
    """Current version plus applied and pending script versions."""
    db_path = db_path or get_settings().storage.db_path
    known = [script.version for script in schema_scripts()]

    if not db_path.exists():
        return {"exists": False, "current_version": None, "applied": [], "pending": known}

    async with aiosqlite.connect(db_path) as conn:
        recorded = await applied_versions(conn)

    return {
        "exists": True,
        "current_version": max(recorded, key=int) if recorded else None,
        "applied": sorted(recorded, key=int),
        "pending": [version for version in known if version not in recorded],
    }


async def missing_tables(db_path: Path | None = None) -> list[str]:
    """Planning tables absent from the database."""
    db_path = db_path or get_settings().storage.db_path
    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        existing = {row[0] for row in await cursor.fetchall()}
    return [table for table in PLANNING_TABLES if table not in existing]


def main() -> None:
    """CLI entry point: apply the schema, or report on it."""
    parser = argparse.ArgumentParser(description="Production planning schema setup")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--status", action="store_true", help="Show applied and pending versions")
    group.add_argument("--verify", action="store_true", help="Check the planning tables exist")
    args = parser.parse_args()

    if args.status:
        status = asyncio.run(schema_status(args.db_path))
        print(f"Database exists: {status['exists']}")
        print(f"Current version: {status['current_version'] or 'none'}")
        print(f"Applied: {', '.join(status['applied']) or '-'}")
        print(f"Pending: {', '.join(status['pending']) or '-'}")
    elif args.verify:
        missing = asyncio.run(missing_tables(args.db_path))
        if missing:
            print(f"Missing tables: {', '.join(missing)}")
            sys.exit(1)
        print("All planning tables present")
    else:
        applied = asyncio.run(run_migrations(args.db_path))
        print(f"Applied: {', '.join(applied) or 'nothing, schema is current'}")


if __name__ == "__main__":
    main()
