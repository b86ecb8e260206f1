"""
Department queries.
"""
from sqlalchemy import func

from employee_tracker.models.department import Department
from employee_tracker.models.role import Role
from employee_tracker.utils.exceptions_handlers import handle_db_errors
from employee_tracker.utils.prompts import ChoiceTable


@handle_db_errors
def list_departments(session):
    # Every read ends with commit so the connection is not left idle in a transaction
    rows = session.query(
        Department.id.label("id"),
        Department.department_name.label("department"),
    ).order_by(Department.id.asc()).all()
    result = [dict(row._mapping) for row in rows]
    session.commit()
    return result


@handle_db_errors
def budget_by_department(session):
    """Total salary of the roles in each department. Departments without roles are left out."""
    rows = session.query(
        Department.id.label("id"),
        Department.department_name.label("department"),
        func.sum(Role.salary).label("budget"),
    ).join(Role, Role.department_id == Department.id) \
     .group_by(Department.id, Department.department_name) \
     .order_by(Department.id.asc()).all()
    result = [dict(row._mapping) for row in rows]
    session.commit()
    return result


@handle_db_errors
def department_choices(session):
    departments = session.query(Department).order_by(Department.id.asc()).all()
    result = ChoiceTable((d.id, d.department_name) for d in departments)
    session.commit()
    return result


@handle_db_errors
def insert_department(session, name):
    new_dept = Department(department_name=name)
    session.add(new_dept)
    session.commit()
    return new_dept.id


@handle_db_errors
def delete_department(session, department_id):
    deleted = session.query(Department).filter(Department.id == department_id).delete(synchronize_session=False)
    session.commit()
    return deleted
