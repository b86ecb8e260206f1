import logging
import random
import sys

from employee_tracker.app import configure_logging
from employee_tracker.config.config import SQLALCHEMY_DATABASE_URI
from employee_tracker.models.department import Department
from employee_tracker.models.employee import Employee
from employee_tracker.models.role import Role
from employee_tracker.utils.exceptions import DatabaseError
from employee_tracker.utils.exceptions_handlers import handle_db_errors
from employee_tracker.utils.session_manager import open_session

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Engineering", "Finance", "Legal", "Sales"]

# (title, salary, department)
ROLES = [
    ("Lead Engineer", 150000, "Engineering"),
    ("Software Engineer", 120000, "Engineering"),
    ("Account Manager", 160000, "Finance"),
    ("Accountant", 125000, "Finance"),
    ("Legal Team Lead", 250000, "Legal"),
    ("Lawyer", 190000, "Legal"),
    ("Sales Lead", 100000, "Sales"),
    ("Salesperson", 80000, "Sales"),
]

EMPLOYEES = [
    ("John", "Doe", "Sales Lead"),
    ("Mike", "Chan", "Salesperson"),
    ("Ashley", "Rodriguez", "Lead Engineer"),
    ("Kevin", "Tupik", "Software Engineer"),
    ("Kunal", "Singh", "Account Manager"),
    ("Malia", "Brown", "Accountant"),
    ("Sarah", "Lourd", "Legal Team Lead"),
    ("Tom", "Allen", "Lawyer"),
]


# Insert or reuse departments
def seed_departments(session):
    departments = {}
    for name in DEPARTMENTS:
        dept = session.query(Department).filter_by(department_name=name).first()
        if not dept:
            dept = Department(department_name=name)
            session.add(dept)
        departments[name] = dept
    session.commit()
    return departments


# Insert or update roles
def seed_roles(session, departments):
    roles = {}
    for title, salary, department_name in ROLES:
        department = departments[department_name]
        role = session.query(Role).filter_by(title=title, department_id=department.id).first()
        if not role:
            role = Role(title=title, salary=salary, department_id=department.id)
            session.add(role)
        else:
            role.salary = salary
        roles[title] = role
    session.commit()
    return roles


# Insert employees; everyone after the first reports to someone added before them
def seed_employees(session, roles, rng=None):
    rng = rng or random.Random()
    employees = []
    for i, (first_name, last_name, title) in enumerate(EMPLOYEES):
        manager_id = None if i == 0 else employees[rng.randint(0, i - 1)].id
        emp = session.query(Employee).filter_by(first_name=first_name, last_name=last_name).first()
        if not emp:
            emp = Employee(
                first_name=first_name,
                last_name=last_name,
                role_id=roles[title].id,
                manager_id=manager_id
            )
            session.add(emp)
            session.flush()
        employees.append(emp)
    session.commit()
    return employees


@handle_db_errors
def seed(session, rng=None):
    departments = seed_departments(session)
    roles = seed_roles(session, departments)
    return seed_employees(session, roles, rng)


def main(uri=SQLALCHEMY_DATABASE_URI):
    configure_logging()
    print("⚙️ Setting up database and seeding data...")
    try:
        with open_session(uri, create_schema=True) as session:
            employees = seed(session)
    except DatabaseError as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    print(f"✅ Seeded {len(DEPARTMENTS)} departments, {len(ROLES)} roles and {len(employees)} employees.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
