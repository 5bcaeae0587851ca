"""Storage-outage policy shared by every query function.

Read paths degrade to an empty result when the store is unavailable so that
browsing keeps working during an outage; write paths fail with `Unavailable`.
Every query function takes the (possibly None) session as its first argument.
"""

from functools import wraps

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError

from localpros.core.config import settings
from localpros.core.exceptions import BadRequest, Unavailable
from localpros.core.logging import get_logger

LOGGER = get_logger(__name__, level=settings.log_level)

CONNECTION_ERRORS = (OperationalError, InterfaceError)


def _rollback(db):
    try:
        db.rollback()
    except SQLAlchemyError as e:
        LOGGER.warning(f"[Database] Rollback failed: {e}")


def read_path(default=None):
    """Return `default` (called, if it is a factory) instead of failing when storage is down."""

    def fallback():
        return default() if callable(default) else default

    def decorator(func):
        @wraps(func)
        def wrapper(db, *args, **kwargs):
            if db is None:
                LOGGER.warning(f"[Database] Cannot run {func.__name__}: database not available")
                return fallback()
            try:
                return func(db, *args, **kwargs)
            except CONNECTION_ERRORS as e:
                _rollback(db)
                LOGGER.warning(f"[Database] {func.__name__} failed, returning empty result: {e}")
                return fallback()

        return wrapper

    return decorator


def write_path(func):
    @wraps(func)
    def wrapper(db, *args, **kwargs):
        if db is None:
            LOGGER.warning(f"[Database] Cannot run {func.__name__}: database not available")
            raise Unavailable()
        try:
            return func(db, *args, **kwargs)
        except CONNECTION_ERRORS as e:
            _rollback(db)
            LOGGER.error(f"[Database] {func.__name__} failed: {e}")
            raise Unavailable(original_error=e) from e
        except IntegrityError as e:
            _rollback(db)
            raise BadRequest("Conflicts with an existing record", original_error=e) from e

    return wrapper
