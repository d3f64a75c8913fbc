import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from app.config import settings
from app.db.tables import metadata

logger = logging.getLogger(__name__)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    # sqlite connections are handed across FastAPI's threadpool
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url, future=True, echo=echo, pool_pre_ping=True, connect_args=connect_args
    )


class ConnectionProvider:
    """
    Hands out pooled connections to the repositories.

    Each ``connection()`` block runs in its own transaction: it commits when the
    block exits normally, rolls back when it raises, and always returns the
    connection to the pool.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        with self.engine.begin() as conn:
            yield conn

    def ping(self) -> bool:
        try:
            with self.connection() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
provider = ConnectionProvider(engine)


def init_db(bind: Optional[Engine] = None, reset: Optional[bool] = None):
    """
    Initialize DB schema.

    Behavior:
      - If ``reset`` is true (defaults to the RESET_DB setting), drop & recreate tables.
      - Otherwise create missing tables and leave existing ones in place.
    """
    bind = bind or engine
    if reset is None:
        reset = settings.RESET_DB
    if reset:
        logger.info("Resetting database (RESET_DB set)...")
        metadata.drop_all(bind=bind)
    metadata.create_all(bind=bind)
    logger.info("Database initialized.")


def get_connection_provider() -> ConnectionProvider:
    return provider
