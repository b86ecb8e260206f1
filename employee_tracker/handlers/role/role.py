import logging

from employee_tracker.handlers.department.department import create_department
from employee_tracker.repositories.department_repository import department_choices
from employee_tracker.repositories.role_repository import delete_role, insert_role, list_roles, role_choices
from employee_tracker.utils.custom_responses import render_notice, render_removed, render_success, render_table
from employee_tracker.utils.exceptions_handlers import handle_exceptions
from employee_tracker.utils.helpers import validate_salary, validate_string

logger = logging.getLogger(__name__)

CREATE_DEPARTMENT = "create-department"


@handle_exceptions
def view_all_roles(ctx):
    rows = list_roles(ctx.session)
    render_table(ctx.console, "Current Employee Roles:", rows)


@handle_exceptions
def add_role(ctx):
    departments = department_choices(ctx.session).with_extra(CREATE_DEPARTMENT, "Create Department")
    department_id = ctx.prompter.ask_choice("Which department is this new role in?", departments)

    # Create the department first, then carry on with the role under it
    if department_id == CREATE_DEPARTMENT:
        department_id = create_department(ctx)

    title = ctx.prompter.ask_text("What is the name of your new role?", validate_string)
    salary = ctx.prompter.ask_text("What is the salary of this new role?", validate_salary)

    role_id = insert_role(ctx.session, title, salary, department_id)
    logger.info(f"Created role {role_id} ({title}) in department {department_id}")

    render_success(ctx.console, "Role successfully created!")
    view_all_roles(ctx)


@handle_exceptions
def remove_role(ctx):
    roles = role_choices(ctx.session)
    if not roles:
        render_notice(ctx.console, "There are no roles to remove.")
        return

    role_id = ctx.prompter.ask_choice("Which role would you like to remove?", roles)
    delete_role(ctx.session, role_id)
    logger.info(f"Removed role {role_id}")

    render_removed(ctx.console, "Role Successfully Removed")
    view_all_roles(ctx)
