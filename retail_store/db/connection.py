# retail_store/db/connection.py
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool, StaticPool
from tabulate import tabulate

from retail_store.config import config
from retail_store.exceptions import DatabaseError
from retail_store.logging_setup import get_logger
from retail_store.utils.geo_utils import calculate_distance

log = get_logger('db')

Params = Optional[Dict[str, Any]]

@dataclass
class QueryResult:
    """Materialized result of one statement."""
    columns: List[str] = field(default_factory=list)
    rows: List[List[Optional[str]]] = field(default_factory=list)
    rowcount: int = 0

def _to_text(value):
    """Render a column value the way a text result set would."""
    if value is None:
        return None
    if isinstance(value, str):
        # char(n) columns come back blank-padded
        return value.rstrip()
    if isinstance(value, datetime):
        return value.isoformat(sep=' ')
    if isinstance(value, date):
        return value.isoformat()
    return str(value)

def _register_sqlite_functions(dbapi_connection, connection_record):
    """Provide calculate_distance() on SQLite, where no server function exists."""
    dbapi_connection.create_function('calculate_distance', 4, calculate_distance, deterministic=True)

class DatabaseConnection:
    """Single connection to the retail database plus the statement executors.

    One connection is opened by :meth:`initialize` and kept until
    :meth:`cleanup`. Every executor call is its own statement-level
    transaction: it commits on success and rolls back on failure.
    """

    def __init__(self):
        self._engine = None
        self._connection: Optional[Connection] = None

    def initialize(self, dbname=None, port=None, user=None, password=None, host=None,
                   connection_string=None):
        """Open the database connection.

        Args:
            dbname: Database name
            port: Database port
            user: Database user
            password: Optional password, defaults to configuration
            host: Optional host, defaults to configuration
            connection_string: Full SQLAlchemy URL, overrides the other arguments

        Raises:
            DatabaseError: If the connection cannot be established
        """
        print("Connecting to database...", end='')
        try:
            if connection_string is None:
                url = config.get_db_url(dbname, port, user, password=password, host=host)
            else:
                url = make_url(connection_string)
            print(f"Connection URL: {url.render_as_string(hide_password=True)}\n")

            if url.get_backend_name() == 'sqlite':
                self._engine = create_engine(
                    url,
                    echo=config.get_boolean('DATABASE', 'echo', False),
                    poolclass=StaticPool,
                    connect_args={'check_same_thread': False}
                )
                event.listen(self._engine, 'connect', _register_sqlite_functions)
            else:
                self._engine = create_engine(
                    url,
                    echo=config.get_boolean('DATABASE', 'echo', False),
                    poolclass=NullPool
                )

            self._connection = self._engine.connect()
            print("Done")
            log.info(f"Connected to {url.render_as_string(hide_password=True)}")
        except (SQLAlchemyError, ImportError) as e:
            self._connection = None
            raise DatabaseError(f"Unable to Connect to Database: {str(e)}")

    @property
    def connection(self) -> Connection:
        """The live connection."""
        if self._connection is None:
            raise DatabaseError("Database connection is not initialized")
        return self._connection

    @property
    def engine(self):
        """The SQLAlchemy engine."""
        if self._engine is None:
            raise DatabaseError("Database connection is not initialized")
        return self._engine

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.closed

    def _execute(self, sql: str, params: Params = None) -> QueryResult:
        """Run one statement and materialize its result."""
        conn = self.connection
        log.debug(f"Executing: {sql} {params or {}}")
        try:
            result = conn.execute(text(sql), params or {})
            if result.returns_rows:
                columns = list(result.keys())
                rows = [[_to_text(value) for value in row] for row in result.fetchall()]
                query_result = QueryResult(columns, rows, len(rows))
            else:
                query_result = QueryResult(rowcount=result.rowcount)
            conn.commit()
            return query_result
        except SQLAlchemyError as e:
            conn.rollback()
            message = str(getattr(e, 'orig', None) or e).strip()
            raise DatabaseError(message)
        except Exception:
            conn.rollback()
            raise

    def execute_update(self, sql: str, params: Params = None) -> int:
        """Execute an update SQL statement (INSERT, UPDATE, DELETE, ...).

        Args:
            sql: SQL statement with ``:name`` placeholders
            params: Bound parameter values

        Returns:
            Number of affected rows
        """
        return self._execute(sql, params).rowcount

    def execute_and_print(self, sql: str, params: Params = None) -> int:
        """Execute a query and print its result to standard out.

        A header with the column names is printed before the first row; an
        empty result prints nothing.

        Returns:
            Number of rows returned
        """
        result = self._execute(sql, params)
        if result.rows:
            print(tabulate(result.rows, headers=result.columns))
        return len(result.rows)

    def execute_and_return(self, sql: str, params: Params = None) -> List[List[Optional[str]]]:
        """Execute a query and return its records as lists of text values."""
        return self._execute(sql, params).rows

    def execute_count(self, sql: str, params: Params = None) -> int:
        """Execute a query and return only the number of rows it produced."""
        return len(self._execute(sql, params).rows)

    def create_all_tables(self):
        """Create the tables declared in :mod:`retail_store.models`.

        Only meant for local SQLite databases; the PostgreSQL schema is
        managed outside this client.
        """
        from retail_store.models import Base
        conn = self.connection
        Base.metadata.create_all(conn)
        conn.commit()

    def cleanup(self):
        """Close the physical connection if it is open."""
        try:
            if self._connection is not None:
                self._connection.close()
            if self._engine is not None:
                self._engine.dispose()
        except SQLAlchemyError as e:
            log.warning(f"Error while closing the database connection: {str(e)}")
        finally:
            self._connection = None
            self._engine = None

# Process-wide connection used by the CLI
db = DatabaseConnection()
