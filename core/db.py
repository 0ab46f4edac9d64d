from core import setup
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from util.error import handle_db_error


class CreateDBSession:
    """One unit of work.

    Pending changes are committed when the block exits cleanly and rolled
    back when it raises. SQLAlchemy failures, from inside the block or from
    the commit itself, come out as DatabaseError.
    """

    def __init__(self, operation: str = "complete database operation"):
        self.db_factory = setup.database.get_session()
        self.operation = operation
        self.session = None

    def __enter__(self) -> Session:
        self.session = self.db_factory()
        return self.session

    def __exit__(self, exc_type, exc_value, exc_traceback):
        if self.session is None:
            return False
        try:
            with handle_db_error(self.operation):
                if exc_type is None:
                    self.session.commit()
                    return False
                self.session.rollback()
                if isinstance(exc_value, SQLAlchemyError):
                    raise exc_value
                return False
        finally:
            self.session.close()
