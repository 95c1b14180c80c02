"""Database gateway for the bus feedback service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote_plus

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.expression import Executable

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# MySQL client/server error numbers reported by the driver.
CONNECTION_REFUSED_CODES = {2002, 2003, 2005}
UNKNOWN_DATABASE_CODE = 1049


class DatabaseError(RuntimeError):
    """Raised when a database interaction cannot be completed."""


@dataclass(frozen=True)
class ExecuteResult:
    rows_affected: int
    generated_id: Optional[int] = None


def build_database_url(settings: Settings) -> str:
    """Return the SQLAlchemy URL described by the settings."""

    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    user_part = quote_plus(settings.DB_USER) if settings.DB_USER else ""
    password_part = quote_plus(settings.DB_PASSWORD) if settings.DB_PASSWORD else ""
    if user_part and password_part:
        credentials = f"{user_part}:{password_part}@"
    elif user_part:
        credentials = f"{user_part}@"
    else:
        credentials = ""
    return (
        f"mysql+pymysql://{credentials}{settings.DB_HOST}:{settings.DB_PORT}"
        f"/{settings.DB_NAME}"
    )


def create_database_engine(settings: Settings) -> Engine:
    """Create the pooled engine used in production."""

    return create_engine(
        build_database_url(settings),
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,              # never more than DB_POOL_SIZE connections
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=1800,
        pool_pre_ping=True,
        connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
    )


def _driver_error_code(exc: SQLAlchemyError) -> Optional[int]:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        args = getattr(exc.orig, "args", ())
        if args and isinstance(args[0], int):
            return args[0]
    return None


def _driver_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class Database:
    """Owns the connection pool and runs parameterized statements.

    Every call checks a connection out for the duration of one statement and
    commits it; the connection goes back to the pool on success and on error.
    """

    def __init__(self, engine: Engine, *, database_name: str = "") -> None:
        self._engine = engine
        self._database_name = database_name or (engine.url.database or "")

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_database_engine(settings), database_name=settings.DB_NAME)

    @property
    def engine(self) -> Engine:
        return self._engine

    def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> ExecuteResult:
        """Run a write statement and report affected rows and generated key."""

        try:
            with self._engine.begin() as connection:
                result = connection.execute(statement, dict(params or {}))
                generated_id = None
                if result.is_insert and result.inserted_primary_key:
                    generated_id = result.inserted_primary_key[0]
                return ExecuteResult(rows_affected=result.rowcount, generated_id=generated_id)
        except SQLAlchemyError as exc:
            raise DatabaseError(_driver_message(exc)) from exc

    def query(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Run a read statement and return its rows as plain dictionaries."""

        try:
            with self._engine.begin() as connection:
                rows = connection.execute(statement, dict(params or {})).mappings().all()
        except SQLAlchemyError as exc:
            raise DatabaseError(_driver_message(exc)) from exc
        return [dict(row) for row in rows]

    def verify_connection(self) -> bool:
        """Check the database connection once; log what went wrong instead of raising."""

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Database connection failed: %s", _driver_message(exc))
            code = _driver_error_code(exc)
            if code in CONNECTION_REFUSED_CODES:
                logger.error(
                    "Check that the MySQL server is running and that DB_HOST/DB_PORT "
                    "and the credentials in .env are correct."
                )
            elif code == UNKNOWN_DATABASE_CODE:
                logger.error(
                    "Check that the database %r exists on the MySQL server.",
                    self._database_name,
                )
            return False

        logger.info("Connected to database %r", self._database_name)
        return True

    def create_schema(self) -> None:
        """Create the feedback table when it does not exist yet."""

        # Registers the mapped tables on Base.metadata.
        import app.models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as exc:
            raise DatabaseError(_driver_message(exc)) from exc

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = [
    "Base",
    "Database",
    "DatabaseError",
    "ExecuteResult",
    "build_database_url",
    "create_database_engine",
]
