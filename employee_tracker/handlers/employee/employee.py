import logging

from employee_tracker.repositories.employee_repository import (
    delete_employee,
    employee_choices,
    insert_employee,
    list_employees,
    list_employees_by_department,
    update_employee_manager as save_employee_manager,
    update_employee_role as save_employee_role,
)
from employee_tracker.repositories.role_repository import role_choices
from employee_tracker.utils.custom_responses import render_notice, render_removed, render_success, render_table
from employee_tracker.utils.exceptions import InvalidManagerSelection
from employee_tracker.utils.exceptions_handlers import handle_exceptions
from employee_tracker.utils.helpers import is_same, validate_string
from employee_tracker.utils.prompts import ChoiceTable

logger = logging.getLogger(__name__)

NO_MANAGER = None


@handle_exceptions
def view_all_employees(ctx):
    rows = list_employees(ctx.session)
    render_table(ctx.console, "Current Employees:", rows)


@handle_exceptions
def view_employees_by_department(ctx):
    rows = list_employees_by_department(ctx.session)
    render_table(ctx.console, "Employees by Department:", rows)


@handle_exceptions
def add_employee(ctx):
    roles = role_choices(ctx.session)
    if not roles:
        render_notice(ctx.console, "Add a role before adding employees.")
        return

    first_name = ctx.prompter.ask_text("What is the employee's first name?", validate_string)
    last_name = ctx.prompter.ask_text("What is the employee's last name?", validate_string)
    role_id = ctx.prompter.ask_choice("What is the employee's role?", roles)

    # "None" comes first so the very first employee can be added
    managers = ChoiceTable([(NO_MANAGER, "None")] + employee_choices(ctx.session).items())
    manager_id = ctx.prompter.ask_choice("Who is the employee's manager?", managers)

    employee_id = insert_employee(ctx.session, first_name, last_name, role_id, manager_id)
    logger.info(f"Added employee {employee_id} ({first_name} {last_name})")

    render_success(ctx.console, "Employee has been added!")
    view_all_employees(ctx)


@handle_exceptions
def update_employee_role(ctx):
    employees = employee_choices(ctx.session)
    roles = role_choices(ctx.session)
    if not employees or not roles:
        render_notice(ctx.console, "There must be at least one employee and one role.")
        return

    employee_id = ctx.prompter.ask_choice("Which employee has a new role?", employees)
    role_id = ctx.prompter.ask_choice("What is their new role?", roles)

    save_employee_role(ctx.session, employee_id, role_id)
    logger.info(f"Employee {employee_id} now has role {role_id}")

    render_success(ctx.console, "Employee Role Updated")
    view_all_employees(ctx)


@handle_exceptions
def update_employee_manager(ctx):
    employees = employee_choices(ctx.session)
    if len(employees) < 2:
        render_notice(ctx.console, "At least two employees are needed to assign a manager.")
        return

    employee_id = ctx.prompter.ask_choice("Which employee has a new manager?", employees)
    manager_id = ctx.prompter.ask_choice("Who is their manager?", employees)

    if employee_id == manager_id or is_same(employees.label_for(employee_id), employees.label_for(manager_id)):
        raise InvalidManagerSelection()

    save_employee_manager(ctx.session, employee_id, manager_id)
    logger.info(f"Employee {employee_id} now reports to {manager_id}")

    render_success(ctx.console, "Employee Manager Updated")
    view_all_employees(ctx)


@handle_exceptions
def remove_employee(ctx):
    employees = employee_choices(ctx.session)
    if not employees:
        render_notice(ctx.console, "There are no employees to remove.")
        return

    employee_id = ctx.prompter.ask_choice("Which employee would you like to remove?", employees)
    delete_employee(ctx.session, employee_id)
    logger.info(f"Removed employee {employee_id}")

    render_removed(ctx.console, "Employee Successfully Removed")
    view_all_employees(ctx)
