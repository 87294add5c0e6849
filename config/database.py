"""Database engine, session factory and the scoped transaction helper."""
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from config.settings import Settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine with a bounded connection pool.

    pool_size is the number of idle connections kept, pool_size + max_overflow
    the maximum open at once. pool_recycle bounds a connection's lifetime.
    """
    url = settings.sqlalchemy_url
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False)

    engine = create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
        echo=False,
    )
    logger.info(
        f"Database engine ready: pool_size={settings.db_pool_size}, "
        f"max_overflow={settings.db_max_overflow}, pool_recycle={settings.db_pool_recycle}s"
    )
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def transaction_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Provide a session bound to one transaction.

    Commits when the block finishes, rolls back if it raises anything, and
    always returns the connection to the pool.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()
