# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from cms.shared.config import DatabaseConfig
from cms.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def create_db_engine(config: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    if _is_sqlite(config.url):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }

    engine = create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args=connect_args,
    )

    if _is_sqlite(config.url):
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


def create_session_factory(engine: Engine) -> scoped_session[Session]:
    return scoped_session(
        sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    )


def init_db(engine: Engine) -> None:
    # Registers the mapped tables on Base.metadata.
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database schema ensured on {engine.url.render_as_string(hide_password=True)}")


def ping_database(engine: Engine) -> bool:
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True
