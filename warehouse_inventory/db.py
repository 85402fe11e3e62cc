from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, scoped_session

from warehouse_inventory.config import config
from warehouse_inventory.exceptions import ConfigError, DatabaseError
from warehouse_inventory.logging_setup import get_logger

logger = get_logger('warehouse_inventory.db')


def _configure_sqlite_connection(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY and ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Hand transaction control to SQLAlchemy so SAVEPOINTs nest inside a real BEGIN
    dbapi_connection.isolation_level = None


def _begin_sqlite_transaction(connection):
    connection.exec_driver_sql("BEGIN")


def build_engine(connection_string, echo=False, **pool_options):
    """Create an engine for the inventory schema.

    Pool options are only passed to server databases. SQLite connections
    get foreign key enforcement and an explicit BEGIN, which repository
    savepoints rely on.

    Args:
        connection_string: SQLAlchemy database URL
        echo: Log emitted SQL
        **pool_options: pool_size, max_overflow, pool_timeout, pool_recycle

    Returns:
        SQLAlchemy engine
    """
    if not connection_string:
        raise ConfigError("No database URL configured", details={'section': 'DATABASE', 'key': 'url'})

    url = make_url(connection_string)

    if url.get_backend_name() == 'sqlite':
        engine = create_engine(url, echo=echo)
        event.listen(engine, 'connect', _configure_sqlite_connection)
        event.listen(engine, 'begin', _begin_sqlite_transaction)
    else:
        options = {key: value for key, value in pool_options.items() if value is not None}
        engine = create_engine(url, echo=echo, **options)

    return engine


class Database:
    """Database connection manager for the Warehouse Inventory System."""

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super(Database, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the database connection if not already initialized."""
        if self._initialized:
            return

        self._engine = None
        self._session_factory = None
        self._session = None
        self._initialized = True

    def initialize(self, connection_string=None):
        """Initialize database connection.

        Args:
            connection_string: Optional database connection string.
                              If not provided, will use configuration.
        """
        db_config = config.db_config
        if connection_string is None:
            connection_string = db_config['url']

        try:
            engine = build_engine(
                connection_string,
                echo=db_config['echo'],
                pool_size=db_config['pool_size'],
                max_overflow=db_config['max_overflow'],
                pool_timeout=db_config['pool_timeout'],
                pool_recycle=db_config['pool_recycle']
            )
        except ConfigError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to create database engine: {str(e)}")

        # Release the previous pool before switching engines
        self.dispose()

        self._engine = engine
        self._session_factory = sessionmaker(bind=self._engine)
        self._session = scoped_session(self._session_factory)

        logger.info(f"Database initialized: {self._engine.url.render_as_string(hide_password=True)}")

    def dispose(self):
        """Close pooled connections and forget the engine."""
        if self._session is not None:
            self._session.remove()
        if self._engine is not None:
            self._engine.dispose()

        self._engine = None
        self._session_factory = None
        self._session = None

    def create_all_tables(self):
        """Create all tables defined in the models."""
        from warehouse_inventory.models import Base
        Base.metadata.create_all(self.engine)

    def drop_all_tables(self):
        """Drop all tables from the database."""
        from warehouse_inventory.models import Base
        Base.metadata.drop_all(self.engine)

    @property
    def session(self):
        """Get the current database session."""
        if self._session is None:
            self.initialize()
        return self._session

    @property
    def engine(self):
        """Get the database engine."""
        if self._engine is None:
            self.initialize()
        return self._engine

    @contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations."""
        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

# Global database instance
db = Database()

@contextmanager
def session_scope():
    """Session scope context manager."""
    with db.session_scope() as session:
        yield session
