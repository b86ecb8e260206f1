"""
Employee queries.
"""
from employee_tracker.models.department import Department
from employee_tracker.models.employee import Employee
from employee_tracker.models.role import Role
from employee_tracker.utils.exceptions import InvalidManagerSelection
from employee_tracker.utils.exceptions_handlers import handle_db_errors
from employee_tracker.utils.prompts import ChoiceTable


@handle_db_errors
def list_employees(session):
    rows = session.query(
        Employee.id.label("id"),
        Employee.first_name.label("first_name"),
        Employee.last_name.label("last_name"),
        Role.title.label("title"),
        Department.department_name.label("department"),
        Role.salary.label("salary"),
    ).join(Role, Role.id == Employee.role_id) \
     .join(Department, Department.id == Role.department_id) \
     .order_by(Employee.id.asc()).all()
    result = [dict(row._mapping) for row in rows]
    session.commit()
    return result


@handle_db_errors
def list_employees_by_department(session):
    # Outer joins keep employees whose role or department is missing.
    rows = session.query(
        Employee.first_name.label("first_name"),
        Employee.last_name.label("last_name"),
        Department.department_name.label("department"),
    ).outerjoin(Role, Employee.role_id == Role.id) \
     .outerjoin(Department, Role.department_id == Department.id) \
     .order_by(Department.department_name.asc(), Employee.id.asc()).all()
    result = [dict(row._mapping) for row in rows]
    session.commit()
    return result


@handle_db_errors
def employee_choices(session):
    employees = session.query(Employee).order_by(Employee.id.asc()).all()
    result = ChoiceTable((e.id, e.full_name) for e in employees)
    session.commit()
    return result


@handle_db_errors
def insert_employee(session, first_name, last_name, role_id, manager_id=None):
    new_emp = Employee(
        first_name=first_name,
        last_name=last_name,
        role_id=role_id,
        manager_id=manager_id
    )
    session.add(new_emp)
    session.commit()
    return new_emp.id


@handle_db_errors
def update_employee_role(session, employee_id, role_id):
    updated = session.query(Employee).filter(Employee.id == employee_id) \
        .update({Employee.role_id: role_id}, synchronize_session=False)
    session.commit()
    return updated


@handle_db_errors
def update_employee_manager(session, employee_id, manager_id):
    # Prevent self-reporting
    if manager_id is not None and int(manager_id) == int(employee_id):
        raise InvalidManagerSelection()
    updated = session.query(Employee).filter(Employee.id == employee_id) \
        .update({Employee.manager_id: manager_id}, synchronize_session=False)
    session.commit()
    return updated


@handle_db_errors
def delete_employee(session, employee_id):
    deleted = session.query(Employee).filter(Employee.id == employee_id).delete(synchronize_session=False)
    session.commit()
    return deleted
