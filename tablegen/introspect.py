"""Database schema introspection.

Reads table and column metadata through SQLAlchemy's inspector and
turns it into :class:`TableMetadata` records for the normalizer.
"""

from typing import Callable, List, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from .codegen.core.config import DbConfig
from .codegen.core.schema import ColumnInfo, TableMetadata
from .logging_config import get_logger

logger = get_logger(__name__)

ALL_TABLES = "*"


class SchemaLoaderError(Exception):
    """Raised when connecting to or reading from a database fails."""

    pass


def build_url(db: DbConfig):
    """Build the SQLAlchemy URL for a db config.

    An explicit ``url`` wins; otherwise the URL is assembled from the
    driver, credentials, host, port and database.
    """
    if db.url:
        return db.url

    return URL.create(
        db.driver,
        username=db.username or None,
        password=db.password or None,
        host=db.host,
        port=db.port or 3306,
        database=db.database,
        query={"charset": db.charset} if db.charset else {},
    )


def parse_table_filter(expression: str) -> Optional[List[str]]:
    """Turn a table filter into an allow-list.

    Returns:
        None when every table is selected, otherwise the listed names.
    """
    expression = expression.strip()
    if expression == ALL_TABLES:
        return None
    return [name.strip() for name in expression.split(",") if name.strip()]


class SchemaLoader:
    """Loads table metadata for the tables selected by db configs."""

    def __init__(self, engine_factory: Callable[..., Engine] = create_engine):
        self.engine_factory = engine_factory

    def load(self, db: DbConfig) -> List[TableMetadata]:
        """Load metadata of every table selected by one db config.

        Tables are read one at a time in database order; the first
        failure aborts the whole load.

        Raises:
            SchemaLoaderError: On connection, query or reflection failures.
        """
        label = db.name or db.database or "<url>"
        try:
            engine = self.engine_factory(build_url(db))
        except (SQLAlchemyError, ImportError, ValueError) as e:
            raise SchemaLoaderError(f"Cannot create engine for {label}: {e}") from e

        try:
            with engine.connect() as conn:
                inspector = inspect(conn)
                names = self.select_tables(inspector.get_table_names(), db.table)
                alias = self._alias_for(db, names)
                tables = [
                    self.load_table(inspector, name, alias or name, conn.dialect)
                    for name in names
                ]
        except SQLAlchemyError as e:
            raise SchemaLoaderError(f"Failed to read schema of {label}: {e}") from e
        finally:
            engine.dispose()

        logger.info("Loaded %d table(s) from %s", len(tables), label)
        return tables

    def select_tables(self, available: List[str], expression: str) -> List[str]:
        """Apply a table filter, keeping database order."""
        wanted = parse_table_filter(expression)
        if wanted is None:
            return list(available)

        missing = [name for name in wanted if name not in available]
        if missing:
            logger.warning("Tables not found: %s", ", ".join(missing))

        return [name for name in available if name in wanted]

    def _alias_for(self, db: DbConfig, names: List[str]) -> Optional[str]:
        """Name a single matched table after alias_name, falling back to name."""
        alias = db.alias_name or db.name
        if not alias:
            return None
        if len(names) == 1:
            return alias
        # Only an explicit alias_name is worth a warning
        if names and db.alias_name:
            logger.warning(
                "alias_name %r ignored: filter %r selects %d tables",
                db.alias_name,
                db.table,
                len(names),
            )
        return None

    def load_table(self, inspector, name: str, alias: str, dialect) -> TableMetadata:
        """Read the columns of one table, in ordinal order."""
        pk = inspector.get_pk_constraint(name) or {}
        pk_cols = set(pk.get("constrained_columns") or [])

        columns = []
        for col in inspector.get_columns(name):
            columns.append(
                ColumnInfo(
                    name=col["name"],
                    native_type=col["type"].compile(dialect=dialect),
                    nullable=bool(col.get("nullable", True)),
                    primary_key=col["name"] in pk_cols,
                    comment=col.get("comment") or None,
                )
            )

        logger.debug("Table %s: %d column(s)", name, len(columns))
        return TableMetadata(name=name, alias=alias, columns=tuple(columns))
