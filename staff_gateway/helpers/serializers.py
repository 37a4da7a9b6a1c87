"""
Employee and Department serialization helpers for Redis persistence.

Converts Employee and Department objects to Redis hash format.
"""

from __future__ import annotations

from staff_gateway.api.types import Employee, Department


def employee_to_dict(employee: Employee) -> dict:
    """Convert Employee object to dict for Redis storage"""
    return {
        'name': employee.name,
        'salary': employee.salary,
        'department_id': employee.department_id if employee.department_id is not None else ''
    }


def department_to_dict(department: Department) -> dict:
    """Convert Department object to dict for Redis storage"""
    return {
        'name': department.name
    }
