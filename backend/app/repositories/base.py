import enum
import logging
from typing import Any, Callable, List, Mapping, NamedTuple, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from app.db import ConnectionProvider

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError itself, unwrapped, for ints wider than 64 bits
_STORAGE_ERRORS = (SQLAlchemyError, OverflowError)

T = TypeVar("T")
RowMapper = Callable[[Mapping[str, Any]], T]


class DataAccessError(Exception):
    """Storage or connectivity failure; fatal for the current request."""
    pass


class WriteOutcome(enum.Enum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"
    NO_ROWS_AFFECTED = "no_rows_affected"

    @property
    def ok(self) -> bool:
        return self is WriteOutcome.UPDATED


class WriteResult(NamedTuple):
    rowcount: int
    lastrowid: Optional[int]


class SqlRepository:
    """
    Base for the raw-SQL repositories.

    Every helper opens exactly one connection from the provider and gives it
    back before returning, whether the statement succeeded or not.
    """

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def _fetch_all(
        self, stmt: TextClause, mapper: RowMapper, params: Optional[Mapping[str, Any]] = None
    ) -> List[T]:
        try:
            with self.provider.connection() as conn:
                rows = conn.execute(stmt, params or {}).mappings().all()
                return [mapper(r) for r in rows]
        except _STORAGE_ERRORS as e:
            logger.error(f"Query failed: {e}")
            raise DataAccessError("Query failed") from e

    def _fetch_one(
        self, stmt: TextClause, mapper: RowMapper, params: Optional[Mapping[str, Any]] = None
    ) -> Optional[T]:
        try:
            with self.provider.connection() as conn:
                row = conn.execute(stmt, params or {}).mappings().one_or_none()
                return mapper(row) if row is not None else None
        except _STORAGE_ERRORS as e:
            logger.error(f"Query failed: {e}")
            raise DataAccessError("Query failed") from e

    def _execute(self, stmt: TextClause, params: Mapping[str, Any]) -> WriteResult:
        try:
            with self.provider.connection() as conn:
                result = conn.execute(stmt, params)
                return WriteResult(result.rowcount, result.lastrowid)
        except _STORAGE_ERRORS as e:
            logger.error(f"Statement failed: {e}")
            raise DataAccessError("Statement failed") from e
