from sqlalchemy import Column, Integer, String
from employee_tracker.models.base import Base

class Department(Base):
    __tablename__ = 'department'

    id = Column(Integer, primary_key=True, autoincrement=True)
    department_name = Column(String(30), unique=True, nullable=False)
