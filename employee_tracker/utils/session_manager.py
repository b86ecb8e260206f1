import logging
from contextlib import contextmanager
from dataclasses import dataclass

from rich.console import Console
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from employee_tracker.config.config import SQLALCHEMY_DATABASE_URI, SQLALCHEMY_ECHO
from employee_tracker.models.base import Base
from employee_tracker.models.department import Department  # noqa: F401
from employee_tracker.models.role import Role  # noqa: F401
from employee_tracker.models.employee import Employee  # noqa: F401
from employee_tracker.utils.exceptions import DatabaseError
from employee_tracker.utils.helpers import safe_close

logger = logging.getLogger(__name__)


@dataclass
class TrackerContext:
    """Everything a handler needs, passed explicitly instead of held globally."""
    session: Session
    prompter: object
    console: Console


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(uri: str = SQLALCHEMY_DATABASE_URI, echo: bool = SQLALCHEMY_ECHO) -> Engine:
    kwargs = {"echo": echo}
    if uri.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if uri in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    engine = create_engine(uri, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_schema(engine: Engine):
    Base.metadata.create_all(engine)


@contextmanager
def open_session(uri: str = SQLALCHEMY_DATABASE_URI, echo: bool = SQLALCHEMY_ECHO, create_schema: bool = False):
    """
    Acquire one session for the lifetime of the block.

    Connectivity is checked up front so a bad URL or unreachable server fails
    here as DatabaseError. The session is closed and the engine disposed on
    every exit path, including that one.
    """
    engine = None
    session = None
    try:
        try:
            engine = create_db_engine(uri, echo)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            if create_schema:
                init_schema(engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not connect to the database: {e}")
            raise DatabaseError(f"Could not connect to the database: {e}", orig=e) from e

        session = sessionmaker(bind=engine)()
        logger.info(f"Connected to {engine.url.render_as_string(hide_password=True)}")
        yield session
    finally:
        safe_close(session)
        if engine is not None:
            engine.dispose()
