import math

from employee_tracker.utils.exceptions import EmptyInput, InvalidNumber


def validate_string(value):
    """Return the trimmed value, or raise EmptyInput if nothing is left."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise EmptyInput()
    return value.strip()


def validate_salary(value):
    """Return the salary as a float; it must be a finite number >= 0."""
    if value is None:
        raise InvalidNumber()
    try:
        salary = float(str(value).strip())
    except ValueError:
        raise InvalidNumber()
    if not math.isfinite(salary) or salary < 0:
        raise InvalidNumber()
    return salary


def is_same(a, b):
    return a == b


def full_name(first_name, last_name):
    return f"{first_name} {last_name}"


def format_salary(value):
    if value is None:
        return ""
    return f"{float(value):,.2f}"


def safe_close(session):
    if session:
        session.close()
