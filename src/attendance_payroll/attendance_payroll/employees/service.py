from __future__ import annotations

from ..core.exceptions import EmployeeNotFound
from .model import Employee
from .repository import EmployeeRepository


def require_employee(employees: EmployeeRepository, employee_id: str) -> Employee:
    """Roster lookup shared by the services; no retry on a miss."""
    employee = employees.get_by_id(str(employee_id))
    if not employee:
        raise EmployeeNotFound(f"Nhân viên không tồn tại: {employee_id}")
    return employee
