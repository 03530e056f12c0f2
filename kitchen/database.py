# kitchen/database.py

import logging
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from kitchen.core.errors import InternalError

logger = logging.getLogger("kitchen")

Base = declarative_base()


class Store:
    """Ready-to-use handle on the relational store."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self):
        self.engine.dispose()


def _configure_sqlite_connection(dbapi_connection, connection_record):
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINT works with pysqlite
    dbapi_connection.isolation_level = None

    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_sqlite_transaction(conn):
    conn.exec_driver_sql("BEGIN")


def _seed_locations(engine: Engine, names: list[str]):
    from kitchen.models.locations import Location

    with Session(engine) as db:
        db.add_all([Location(name=name) for name in names])
        db.commit()


def init_store(database_url: str, default_locations: list[str] | None = None) -> Store:
    """
    Open the store and bootstrap the schema when it has no tables yet.

    An existing store is opened as-is, it is never migrated here (see alembic/).
    Raises RuntimeError when the store cannot be opened or bootstrapped.
    """
    # Register every model on Base.metadata
    import kitchen.models  # noqa: F401

    connect_args = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        # Sync FastAPI routes run in a threadpool
        connect_args["check_same_thread"] = False

    try:
        engine = create_engine(database_url, connect_args=connect_args)
        if is_sqlite:
            event.listen(engine, "connect", _configure_sqlite_connection)
            event.listen(engine, "begin", _begin_sqlite_transaction)

        existing_tables = inspect(engine).get_table_names()
        if existing_tables:
            logger.info(f"Opened existing store with tables: {', '.join(sorted(existing_tables))}")
        else:
            Base.metadata.create_all(bind=engine)
            _seed_locations(engine, default_locations or [])
            logger.info("Database schema initialized successfully.")
    except SQLAlchemyError as e:
        raise RuntimeError(f"Unable to initialize store at {database_url}: {e}") from e

    return Store(engine)


def get_db(request: Request):
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, failure_message: str = "Unable to complete operation"):
    """
    Commit on success, roll back on any exception.

    Store errors are logged and surfaced as InternalError once rolled back.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{failure_message}: {e}")
        raise InternalError(failure_message) from e
    except Exception:
        db.rollback()
        raise
