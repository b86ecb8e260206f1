import unittest
from io import StringIO
from unittest.mock import patch

from sqlalchemy.orm import sessionmaker

from employee_tracker.app import EXIT, MENU, main, run_menu
from employee_tracker.repositories.department_repository import insert_department, list_departments
from employee_tracker.utils.custom_responses import create_console
from employee_tracker.utils.prompts import ScriptedPrompter
from employee_tracker.utils.session_manager import TrackerContext, create_db_engine, init_schema


class MenuTest(unittest.TestCase):
    """Test cases for the menu dispatcher"""

    def setUp(self):
        self.engine = create_db_engine("sqlite://")
        init_schema(self.engine)
        self.session = sessionmaker(bind=self.engine)()
        self.output = StringIO()
        self.console = create_console(self.output)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def context(self, *answers):
        return TrackerContext(session=self.session, prompter=ScriptedPrompter(answers, self.console), console=self.console)

    def test_menu_labels(self):
        self.assertEqual(list(MENU), [
            "View All Employees",
            "View All Roles",
            "View All Departments",
            "View All Employees By Department",
            "View Department Budgets",
            "Update Employee Role",
            "Update Employee Manager",
            "Add Employee",
            "Add Role",
            "Add Department",
            "Remove Employee",
            "Remove Role",
            "Remove Department",
            "Exit",
        ])
        self.assertIsNone(MENU[EXIT])

    def test_dispatches_until_exit(self):
        insert_department(self.session, "Engineering")
        ctx = self.context("View All Departments", "Add Department", "Sales", "Exit")
        run_menu(ctx)
        self.assertIn("All Departments:", self.output.getvalue())
        self.assertEqual([row["department"] for row in list_departments(self.session)], ["Engineering", "Sales"])
        self.assertEqual(ctx.prompter.asked.count("Please select an option:"), 3)

    def test_failed_handler_returns_to_menu(self):
        department_id = insert_department(self.session, "Engineering")
        ctx = self.context("Add Department", "Engineering", "Exit")
        run_menu(ctx)
        self.assertIn("Duplicate Entry", self.output.getvalue())
        self.assertEqual(list_departments(self.session), [{"id": department_id, "department": "Engineering"}])

    def test_running_out_of_answers_ends_the_loop(self):
        with self.assertRaises(EOFError):
            run_menu(self.context("View All Roles"))


@patch("employee_tracker.app.configure_logging")
class MainTest(unittest.TestCase):
    """Test cases for the process entry point"""

    def setUp(self):
        self.output = StringIO()
        console = create_console(self.output)
        patcher = patch("employee_tracker.app.create_console", return_value=console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_exit_returns_zero(self, configure_logging):
        with patch("employee_tracker.app.RichPrompter", lambda console: ScriptedPrompter(["View All Employees", "Exit"], console)):
            self.assertEqual(main("sqlite://"), 0)
        self.assertIn("Current Employees:", self.output.getvalue())
        self.assertIn("Goodbye!", self.output.getvalue())

    def test_connection_failure_returns_one(self, configure_logging):
        self.assertEqual(main("sqlite:////nonexistent-directory/tracker.db"), 1)
        self.assertIn("Database Error", self.output.getvalue())

    def test_end_of_input_returns_130(self, configure_logging):
        with patch("employee_tracker.app.RichPrompter", lambda console: ScriptedPrompter([], console)):
            self.assertEqual(main("sqlite://"), 130)
