"""Database engine factory for SQLModel."""

from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from core.log import get_logger
from core.models.rows import SourcePost, Summary
from core.types import Environment

logger = get_logger(__name__)

MEMORY_DATABASE_URL = "sqlite:///:memory:"


def setup_database_url(environment: Environment, db_path: Path | None = None) -> str:
    """Construct database URL based on environment configuration.

    Args:
        environment: Environment type
        db_path: Optional custom database path. If provided, overrides default path.

    Returns:
        Database connection URL
    """
    if db_path is None and environment == Environment.TESTING:
        return MEMORY_DATABASE_URL

    if db_path is not None:
        db_path = Path(db_path)
    elif environment == Environment.PRODUCTION:
        db_path = Path("db", "glance.db")
    elif environment == Environment.DEVELOPMENT:
        db_path = Path("db", "glance.dev.db")
    else:
        raise ValueError(f"Unknown environment: {environment}")

    # Ensure the directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


def create_database_engine(
    environment: Environment,
    echo: bool = False,
    db_path: Path | None = None,
) -> Engine:
    """Create database engine based on environment configuration.

    Args:
        environment: Environment type
        echo: Enable SQL echo for debugging
        db_path: Optional custom database path. If provided, overrides default path.

    Returns:
        Configured SQLModel engine
    """
    database_url = setup_database_url(environment, db_path)
    logger.info(f"Creating database engine for: {database_url}")

    engine_kwargs: dict[str, Any] = {
        "echo": echo,
        "connect_args": {
            "check_same_thread": False,
            "timeout": 60.0,
        },
    }
    if database_url == MEMORY_DATABASE_URL:
        # Every session must see the same in-memory database
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(pool_pre_ping=True, pool_recycle=3600, pool_size=10)

    engine = create_engine(database_url, **engine_kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_database_tables(engine: Engine) -> None:
    """Create all database tables using SQLModel."""
    logger.info("Creating database tables...")

    SQLModel.metadata.create_all(engine)

    for model in (Summary, SourcePost):
        logger.info(f"> Created table for {model.__tablename__}")
