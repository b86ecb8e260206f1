from sqlalchemy import Column, Integer, String, ForeignKey
from employee_tracker.models.base import Base
from employee_tracker.utils.helpers import full_name

class Employee(Base):
    __tablename__ = 'employee'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    role_id = Column(Integer, ForeignKey('role.id'), nullable=True)
    manager_id = Column(Integer, ForeignKey('employee.id', ondelete='SET NULL'), nullable=True)

    @property
    def full_name(self):
        return full_name(self.first_name, self.last_name)
