import unittest
from unittest.mock import patch

from sqlalchemy import inspect, text

from employee_tracker.utils.exceptions import DatabaseError
from employee_tracker.utils.session_manager import create_db_engine, open_session


class OpenSessionTest(unittest.TestCase):
    """Test cases for session acquisition and release"""

    def test_creates_schema(self):
        with open_session("sqlite://", create_schema=True) as session:
            tables = inspect(session.get_bind()).get_table_names()
        self.assertEqual(sorted(tables), ["department", "employee", "role"])

    def test_sqlite_enforces_foreign_keys(self):
        with open_session("sqlite://") as session:
            self.assertEqual(session.execute(text("PRAGMA foreign_keys")).scalar(), 1)

    def test_session_closed_on_error(self):
        with patch("employee_tracker.utils.session_manager.safe_close") as safe_close:
            with self.assertRaises(RuntimeError):
                with open_session("sqlite://"):
                    raise RuntimeError("boom")
        safe_close.assert_called_once()

    def test_unreachable_database(self):
        with self.assertRaises(DatabaseError) as cm:
            with open_session("sqlite:////nonexistent-directory/tracker.db"):
                self.fail("session should not be yielded")
        self.assertIsNotNone(cm.exception.orig)

    def test_malformed_url(self):
        with self.assertRaises(DatabaseError):
            with open_session("not a database url"):
                self.fail("session should not be yielded")

    def test_in_memory_engine_shares_one_database(self):
        engine = create_db_engine("sqlite://")
        try:
            with engine.begin() as conn:
                conn.execute(text("CREATE TABLE t (id INTEGER)"))
            with engine.connect() as conn:
                self.assertEqual(conn.execute(text("SELECT COUNT(*) FROM t")).scalar(), 0)
        finally:
            engine.dispose()
