import logging
import sys
from collections import OrderedDict

from employee_tracker.config.config import LOG_FILE, LOG_LEVEL, SQLALCHEMY_DATABASE_URI
from employee_tracker.handlers.department.department import (
    add_department,
    remove_department,
    view_all_departments,
    view_department_budgets,
)
from employee_tracker.handlers.employee.employee import (
    add_employee,
    remove_employee,
    update_employee_manager,
    update_employee_role,
    view_all_employees,
    view_employees_by_department,
)
from employee_tracker.handlers.role.role import add_role, remove_role, view_all_roles
from employee_tracker.utils.custom_responses import create_console, render_banner, render_error
from employee_tracker.utils.exceptions import DatabaseError
from employee_tracker.utils.prompts import ChoiceTable, RichPrompter
from employee_tracker.utils.session_manager import TrackerContext, open_session

logger = logging.getLogger(__name__)

EXIT = "Exit"

# Menu label -> handler, in display order
MENU = OrderedDict([
    ("View All Employees", view_all_employees),
    ("View All Roles", view_all_roles),
    ("View All Departments", view_all_departments),
    ("View All Employees By Department", view_employees_by_department),
    ("View Department Budgets", view_department_budgets),
    ("Update Employee Role", update_employee_role),
    ("Update Employee Manager", update_employee_manager),
    ("Add Employee", add_employee),
    ("Add Role", add_role),
    ("Add Department", add_department),
    ("Remove Employee", remove_employee),
    ("Remove Role", remove_role),
    ("Remove Department", remove_department),
    (EXIT, None),
])


def run_menu(ctx):
    """Ask for a menu choice and run its handler until Exit is picked."""
    choices = ChoiceTable((label, label) for label in MENU)
    while True:
        choice = ctx.prompter.ask_choice("Please select an option:", choices)
        if choice == EXIT:
            logger.info("Exit selected")
            return
        MENU[choice](ctx)


def configure_logging(level=LOG_LEVEL, log_file=LOG_FILE):
    logging.basicConfig(
        level=level,
        filename=log_file or None,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(uri=SQLALCHEMY_DATABASE_URI):
    configure_logging()
    console = create_console()
    render_banner(console, "Employee Tracker")

    try:
        with open_session(uri, create_schema=True) as session:
            ctx = TrackerContext(session=session, prompter=RichPrompter(console), console=console)
            run_menu(ctx)
    except DatabaseError as e:
        render_error(console, e.title, e.message)
        return 1
    except (KeyboardInterrupt, EOFError):
        console.print()
        logger.info("Session interrupted")
        return 130

    console.print("Goodbye!", style="bold green")
    return 0


if __name__ == "__main__":
    sys.exit(main())
