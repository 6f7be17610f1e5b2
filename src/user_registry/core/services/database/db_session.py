"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from user_registry.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Owns the process-wide database engine.

    Create one instance at application startup and hand out sessions from
    it; the engine is never created implicitly at import time.
    """

    def __init__(self, db_config: DatabaseConfig) -> None:
        logger.info("Setting up database engine for {}", _redact(db_config.url))
        self._engine = create_engine(db_config.url, **self._engine_kwargs(db_config))

    @staticmethod
    def _engine_kwargs(db_config: DatabaseConfig) -> dict:
        kwargs: dict = {"echo": db_config.echo}

        if db_config.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in db_config.url or db_config.url == "sqlite://":
                # Every connection would otherwise see its own empty database
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )
        return kwargs

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all database tables."""
        from user_registry.entities.core.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()


def _redact(url: str) -> str:
    return make_url(url).render_as_string(hide_password=True)
