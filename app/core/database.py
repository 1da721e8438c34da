import enum
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

from app.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

Base = declarative_base()


class ConnectionState(str, enum.Enum):
    connecting = "connecting"
    connected = "connected"
    degraded = "degraded"
    disconnected = "disconnected"


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # in-memory databases live in a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


# =====================================================================
# DATABASE HANDLE
# =====================================================================


class Database:
    """
    Store handle acquired once at startup and shared by every request.

    The engine is created eagerly but does not touch the network until
    `connect()` is called by the connection supervisor.
    """

    def __init__(self, url: str):
        self.url = url
        self.engine = create_engine(url, **_engine_options(url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.state = ConnectionState.disconnected

    @property
    def backend(self) -> str:
        return self.engine.dialect.name

    @property
    def is_connected(self) -> bool:
        return self.state == ConnectionState.connected

    def connect(self) -> None:
        """Ping the database and create missing tables."""
        # registers every model on Base.metadata
        from app import models  # noqa: F401

        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=self.engine)
        self.state = ConnectionState.connected
        logger.info(f"Connected to {self.backend} database")

    def session(self) -> Session:
        if not self.is_connected:
            raise StoreUnavailableError(f"Database is {self.state.value}")
        return self.SessionLocal()

    def close(self) -> None:
        self.engine.dispose()
        self.state = ConnectionState.disconnected
        logger.info("Database connection closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
