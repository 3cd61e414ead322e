"""Database engine and helpers.

This module builds the SQLModel/SQLAlchemy engine (and with it the
connection pool) from `Settings`. The engine is created once by the
application factory and handed to request handlers through the
`get_session` dependency, so tests can substitute their own engine.
"""

import logging

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from .config import Settings

logger = logging.getLogger("portal.database")


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the configured store.

    PostgreSQL connections get pool limits and, when `DB_SSL_NO_VERIFY`
    is set, an encrypted connection without certificate verification.
    """
    url = settings.database_url
    kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
        if settings.DB_SSL_NO_VERIFY:
            kwargs["connect_args"] = {"sslmode": "require"}
    engine = create_engine(url, **kwargs)
    logger.info("database engine ready for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_db_and_tables(engine: Engine):
    """Create the `universities` and `applications` tables.

    This function is intended for tests and local development databases;
    the service never creates or migrates schema on a real deployment.
    """
    from . import models  # noqa: F401  registers the tables on the metadata

    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    """Yield a database `Session` for FastAPI dependency injection.

    The session is bound to the engine stored on `app.state`. Leaving the
    `with` block closes it, which rolls back any open transaction and
    returns the connection to the pool whether or not the request failed.
    """
    with Session(request.app.state.engine) as session:
        yield session
