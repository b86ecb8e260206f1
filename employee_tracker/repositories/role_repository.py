"""
Role queries.
"""
from employee_tracker.models.department import Department
from employee_tracker.models.role import Role
from employee_tracker.utils.exceptions_handlers import handle_db_errors
from employee_tracker.utils.prompts import ChoiceTable


@handle_db_errors
def list_roles(session):
    rows = session.query(
        Role.id.label("id"),
        Role.title.label("title"),
        Department.department_name.label("department"),
    ).join(Department, Role.department_id == Department.id) \
     .order_by(Role.id.asc()).all()
    result = [dict(row._mapping) for row in rows]
    session.commit()
    return result


@handle_db_errors
def role_choices(session):
    roles = session.query(Role).order_by(Role.id.asc()).all()
    result = ChoiceTable((r.id, r.title) for r in roles)
    session.commit()
    return result


@handle_db_errors
def insert_role(session, title, salary, department_id):
    new_role = Role(title=title, salary=salary, department_id=department_id)
    session.add(new_role)
    session.commit()
    return new_role.id


@handle_db_errors
def delete_role(session, role_id):
    # Bulk delete: employees still holding the role make the database refuse,
    # rather than the ORM nulling their role_id.
    deleted = session.query(Role).filter(Role.id == role_id).delete(synchronize_session=False)
    session.commit()
    return deleted
