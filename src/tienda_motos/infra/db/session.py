from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tienda_motos.infra.db.config import database_url, pool_settings

# Created on first use so importing the app never needs a database
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the catalog database engine.

    Pool sizing comes from DB_POOL_SIZE / DB_MAX_OVERFLOW /
    DB_POOL_RECYCLE_SECONDS; connections are pinged before checkout.
    """
    global _engine
    if _engine is None:
        pool = pool_settings()
        _engine = create_engine(
            database_url(),
            pool_size=pool.size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool.recycle_seconds,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Session scope: commit on success, rollback on error, always close."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
