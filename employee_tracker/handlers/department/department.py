import logging

from employee_tracker.repositories.department_repository import (
    budget_by_department,
    delete_department,
    department_choices,
    insert_department,
    list_departments,
)
from employee_tracker.utils.custom_responses import render_notice, render_removed, render_success, render_table
from employee_tracker.utils.exceptions_handlers import handle_exceptions
from employee_tracker.utils.helpers import validate_string

logger = logging.getLogger(__name__)


@handle_exceptions
def view_all_departments(ctx):
    rows = list_departments(ctx.session)
    render_table(ctx.console, "All Departments:", rows)


@handle_exceptions
def view_department_budgets(ctx):
    rows = budget_by_department(ctx.session)
    render_table(ctx.console, "Budget By Department:", rows)


def create_department(ctx):
    """Prompt for a name, insert it and return the new department id.

    Left undecorated so add_role can resume with the id it returns.
    """
    name = ctx.prompter.ask_text("What is the name of your new Department?", validate_string)
    department_id = insert_department(ctx.session, name)
    logger.info(f"Created department {department_id} ({name})")
    render_success(ctx.console, f"{name} Department successfully created!")
    view_all_departments(ctx)
    return department_id


@handle_exceptions
def add_department(ctx):
    create_department(ctx)


@handle_exceptions
def remove_department(ctx):
    departments = department_choices(ctx.session)
    if not departments:
        render_notice(ctx.console, "There are no departments to remove.")
        return

    department_id = ctx.prompter.ask_choice("Which department would you like to remove?", departments)
    delete_department(ctx.session, department_id)
    logger.info(f"Removed department {department_id}")

    render_removed(ctx.console, "Department Successfully Removed")
    view_all_departments(ctx)
