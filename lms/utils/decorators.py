from functools import wraps
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from lms.extensions import db
from lms.exceptions import TransactionError


def transactional(fn):
    """
    Run a service call as one unit of work: commit when it returns, roll
    back when it raises. Database errors come out as TransactionError.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            result = fn(*args, **kwargs)
            db.session.commit()
            return result
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.exception(f"[transaction] {fn.__qualname__} failed: {e}")
            raise TransactionError("Database operation failed") from e
        except Exception:
            db.session.rollback()
            raise
    return wrapper
