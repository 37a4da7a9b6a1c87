"""
Employee and Department deserialization helpers for Redis persistence.

Converts Redis hash format back to Employee and Department objects.
"""

from staff_gateway.api.types import Employee, Department


def dict_to_employee(id: int, data: dict) -> Employee | None:
    """Convert dict from Redis storage to Employee object"""
    if not data:
        return None
    return Employee(
        id=id,
        name=data['name'],
        salary=data['salary'],
        department_id=int(data['department_id']) if data.get('department_id') else None
    )


def dict_to_department(id: int, data: dict) -> Department | None:
    """Convert dict from Redis storage to Department object"""
    if not data:
        return None
    return Department(
        id=id,
        name=data['name']
    )
