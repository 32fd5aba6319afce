from __future__ import annotations

import logging
import os
from pathlib import Path

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import text
from sqlmodel import SQLModel

from scorelist_api.db import tables  # noqa: F401  registers every table on SQLModel.metadata
from scorelist_api.db.session import get_engine

logger = logging.getLogger(__name__)


def tables_to_reset() -> list[str]:
    return [
        "scorelists",
        "users",
        "alembic_version",
    ]


def _find_alembic_dir() -> Path | None:
    """Locate the Alembic migrations directory.

    Checks ``ALEMBIC_DIR`` first, then the repo-root ``alembic/`` next to the
    package. Returns ``None`` when neither exists (e.g. a wheel install), in
    which case callers fall back to ``SQLModel.metadata.create_all()``.
    """
    def _is_valid(p: Path) -> bool:
        return p.is_dir() and (p / "env.py").exists() and (p / "versions").is_dir()

    env_dir = os.getenv("ALEMBIC_DIR")
    if env_dir and _is_valid(Path(env_dir)):
        return Path(env_dir)

    repo_dir = Path(__file__).resolve().parent.parent.parent / "alembic"
    if _is_valid(repo_dir):
        return repo_dir

    return None


def _run_alembic_upgrade(alembic_dir: Path) -> None:
    from alembic import command
    from alembic.config import Config

    engine = get_engine()
    if engine.dialect.name == "postgresql":
        # ALTER TABLE must not block forever behind concurrent readers
        with engine.connect() as conn:
            conn.execute(text("SET lock_timeout = '30s'"))
            conn.commit()

    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(alembic_dir))
    # configparser interpolation: a literal % in the password must be doubled
    url = engine.url.render_as_string(hide_password=False).replace("%", "%%")
    alembic_cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(alembic_cfg, "head")


def migrate() -> None:
    """Bring the schema up to date. Safe to run on every boot; never drops data."""
    alembic_dir = _find_alembic_dir()
    if alembic_dir is None:
        logger.info("No Alembic migrations directory found, using SQLModel create_all")
        SQLModel.metadata.create_all(get_engine())
        return

    logger.info("Running Alembic migrations from %s", alembic_dir)
    try:
        _run_alembic_upgrade(alembic_dir)
    except Exception as exc:
        logger.warning("Alembic migration failed (%s), falling back to create_all", exc)
        SQLModel.metadata.create_all(get_engine())


def reset_db() -> None:
    """Drop all tables and recreate from scratch. Destroys all data."""
    logger.warning("Dropping all tables")
    engine = get_engine()
    cascade = " CASCADE" if engine.dialect.name == "postgresql" else ""
    with engine.begin() as conn:
        for table in tables_to_reset():
            conn.execute(text(f"DROP TABLE IF EXISTS {table}{cascade}"))

    migrate()
    logger.info("Database reset complete")


def auto_migrate() -> None:
    """Migrate on first session if the schema is missing."""
    inspector = sa_inspect(get_engine())
    if not inspector.has_table("scorelists"):
        migrate()


if __name__ == "__main__":
    import sys

    from scorelist_api.utils.logging_config import setup_logging

    setup_logging()

    if "--reset" in sys.argv:
        reset_db()
    else:
        migrate()

    sys.exit(0)
