from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint
from employee_tracker.models.base import Base

class Role(Base):
    __tablename__ = 'role'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(30), nullable=False)
    salary = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    department_id = Column(Integer, ForeignKey('department.id'), nullable=False)

    __table_args__ = (CheckConstraint('salary >= 0', name='ck_role_salary_non_negative'),)
