import logging
from contextlib import contextmanager
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from error import DatabaseError, DatabaseIntegrityError

logger = logging.getLogger(__name__)


@contextmanager
def handle_db_error(operation):
    """Context manager to translate SQLAlchemy errors"""
    try:
        yield
    except IntegrityError as e:
        logger.error(f"Integrity error during {operation}: {e.orig}")
        raise DatabaseIntegrityError(
            msg=f"Could not {operation}: constraint violated"
        ) from e
    except SQLAlchemyError as e:
        logger.error(f"Database error during {operation}: {e}")
        raise DatabaseError(msg=f"Could not {operation}") from e
