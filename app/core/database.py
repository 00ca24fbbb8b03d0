from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool
from .config import Settings
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_database_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Server databases get a QueuePool holding exactly one connection: every
    request shares that long-lived connection and concurrent requests wait
    for it (up to DB_POOL_TIMEOUT seconds). There is no pre-ping, so a
    dropped connection surfaces as a StorageError on the next query.
    """
    url = make_url(settings.DATABASE_URL)
    options = {
        "echo": settings.DB_ECHO_SQL,  # Print all SQL queries to console
    }

    # SQLite picks its own pool and does not take a connect timeout
    if url.get_backend_name() != "sqlite":
        options.update(
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            connect_args={
                "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            },
        )

    engine = create_engine(url, **options)

    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        logger.debug("New database connection established")

    return engine


# =============================================================================
# DATABASE HANDLE
# =============================================================================

class Database:
    """
    Handle on the shared database connection, injected into route handlers.

    Usage in endpoints:
        @router.get("")
        def list_students(db: Database = Depends(get_db)):
            with db.transaction() as conn:
                conn.execute(text("SELECT ..."))
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction; commit on success, roll back on error."""
        with self.engine.begin() as connection:
            yield connection

    def dispose(self) -> None:
        self.engine.dispose()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine) -> None:
    """
    Create the students table if it does not exist yet.

    Development helper only: there is no migration tooling.
    """
    from app.models.student import metadata

    logger.info("Creating database tables...")
    metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def check_database_connection(engine: Engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Connection to database established successfully")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error connecting to database: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def connect_database(settings: Settings) -> Database:
    """
    Open the database when the application starts.

    A failed connection is logged and the handle is still returned; queries
    issued later fail at call time with a StorageError.
    """
    logger.info("Initializing database...")
    engine = create_database_engine(settings)

    if check_database_connection(engine) and settings.DB_CREATE_TABLES:
        try:
            create_database_tables(engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not create database tables: {e}")

    return Database(engine)
