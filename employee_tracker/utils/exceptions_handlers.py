from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from psycopg2.errors import CheckViolation, ForeignKeyViolation, NotNullViolation, UniqueViolation
import re
import logging
from functools import wraps
from employee_tracker.utils.custom_responses import render_error
from employee_tracker.utils.exceptions import DatabaseError, TrackerError

logger = logging.getLogger(__name__)


def describe_integrity_error(e: IntegrityError):
    """Turn a driver integrity error into a (title, message) pair for the user."""
    orig = e.orig
    text = str(orig)

    if isinstance(orig, NotNullViolation) or "NOT NULL constraint failed" in text:
        match = re.search(r'null value in column "(.*?)"', text) or re.search(r'NOT NULL constraint failed: (\S+)', text)
        missing_column = match.group(1) if match else "unknown field"
        return "Missing Required Field", f"The field '{missing_column}' is required and cannot be empty."

    if isinstance(orig, UniqueViolation) or "UNIQUE constraint failed" in text:
        match = re.search(r'Key \((.*?)\)=\((.*?)\) already exists', text) or re.search(r'UNIQUE constraint failed: (\S+)', text)
        field = match.group(1) if match else "value"
        return "Duplicate Entry", f"The {field} you provided already exists."

    if isinstance(orig, ForeignKeyViolation) or "FOREIGN KEY constraint failed" in text:
        match = re.search(r'is still referenced from table "(.*?)"', text)
        if match:
            return "Record In Use", f"This record is still referenced from table '{match.group(1)}'."
        return "Foreign Key Violation", "The change conflicts with related records (still referenced, or referring to a missing row)."

    if isinstance(orig, CheckViolation) or "CHECK constraint failed" in text:
        return "Invalid Data", "A value is outside the allowed range."

    return "Database Integrity Error", "A database constraint was violated."


def handle_db_errors(func):
    """Data access wrapper: roll back and re-raise driver errors as DatabaseError."""
    @wraps(func)
    def wrapper(session, *args, **kwargs):
        try:
            return func(session, *args, **kwargs)

        except IntegrityError as e:
            session.rollback()
            title, message = describe_integrity_error(e)
            logger.error(f"Integrity error in {func.__name__}: {e.orig}")
            raise DatabaseError(message, orig=e.orig, title=title) from e

        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error in {func.__name__}: {e}")
            raise DatabaseError(
                "A database error occurred. Please try again later.",
                orig=getattr(e, "orig", None) or e,
            ) from e

    return wrapper


def handle_exceptions(func):
    """Handler wrapper: show the failure and hand control back to the menu."""
    @wraps(func)
    def wrapper(ctx, *args, **kwargs):
        try:
            return func(ctx, *args, **kwargs)

        except TrackerError as e:
            render_error(ctx.console, e.title, e.message)

        except EOFError:
            raise

        except Exception as e:
            ctx.session.rollback()
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            render_error(ctx.console, "Unexpected Error", str(e))

    return wrapper
