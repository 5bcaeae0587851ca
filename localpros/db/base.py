# localpros/db/base.py
import threading
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from localpros.core.config import settings
from localpros.core.logging import get_logger

LOGGER = get_logger(__name__, level=settings.log_level)

Base = declarative_base()


class Database:
    """
    Process-scoped connection handle.
    The engine and session factory are created lazily, at most once, and
    disposed only by `dispose()` at application shutdown.
    An empty URL (or an engine that cannot be built) leaves the handle
    unavailable: `session()` then returns None.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.Lock()
        self._initialized = False

    def init(self) -> Optional[Engine]:
        with self._lock:
            if self._initialized:
                return self._engine
            self._initialized = True
            if not self.url:
                LOGGER.warning("[Database] No database URL configured; storage unavailable")
                return None
            try:
                self._engine = create_engine(self.url, echo=self.echo, **self.engine_kwargs)
                self._session_factory = sessionmaker(
                    bind=self._engine, autocommit=False, autoflush=False, expire_on_commit=False
                )
            except (SQLAlchemyError, ImportError, ValueError) as e:
                LOGGER.warning(f"[Database] Failed to connect: {e}")
                self._engine = None
                self._session_factory = None
            return self._engine

    @property
    def engine(self) -> Optional[Engine]:
        return self.init()

    @property
    def available(self) -> bool:
        return self.init() is not None

    def ping(self) -> bool:
        engine = self.init()
        if engine is None:
            return False
        try:
            with engine.connect():
                return True
        except SQLAlchemyError as e:
            LOGGER.warning(f"[Database] Ping failed: {e}")
            return False

    def create_all(self):
        engine = self.init()
        if engine is None:
            return
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            LOGGER.warning(f"[Database] Could not create tables: {e}")

    def session(self) -> Optional[Session]:
        if self.init() is None:
            return None
        return self._session_factory()

    def dispose(self):
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._initialized = False


database = Database(settings.database_url, echo=settings.database_echo)


def get_db() -> Generator[Optional[Session], None, None]:
    db = database.session()
    try:
        yield db
    finally:
        if db is not None:
            db.close()
