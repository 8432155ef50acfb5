"""Programmatic Alembic runner.

Builds the Alembic Config in code so migrations can run at application
startup and from the migrate CLI without depending on the working directory.

db_migrations/env.py drives an async engine with asyncio.run(), so none of these
functions may be called from inside a running event loop; the app lifespan
calls them through asyncio.to_thread().
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger("wallet.migrations")

ALEMBIC_DIR = Path(__file__).resolve().parent / "db_migrations"


def build_alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    # ConfigParser interpolation: a literal % in a password must be doubled
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def upgrade(database_url: str, revision: str = "head") -> None:
    logger.info("Applying migrations up to %s", revision)
    command.upgrade(build_alembic_config(database_url), revision)
    logger.info("Migrations applied successfully")


def downgrade(database_url: str, revision: str = "base") -> None:
    logger.info("Rolling back migrations down to %s", revision)
    command.downgrade(build_alembic_config(database_url), revision)
    logger.info("Migrations rolled back successfully")


def stamp(database_url: str, revision: str) -> None:
    """Record `revision` as current without running any migration."""
    command.stamp(build_alembic_config(database_url), revision)
    logger.info("Forced migration version to %s", revision)


def current(database_url: str) -> None:
    """Print the current revision of the database to stdout."""
    command.current(build_alembic_config(database_url))
