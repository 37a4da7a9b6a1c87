"""
Batched department -> employees resolution.

One department-list query resolves ``Department.employees`` for every
department it returns through a single store fan-out, instead of one query
per department.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from strawberry.dataloader import DataLoader

from .types import Department, Employee

if TYPE_CHECKING:
    from staff_gateway.staff_store import StaffStore


def group_employees(departments: list[Department], employees: list[Employee]) -> dict[Department, list[Employee]]:
    """
    Group employees under their departments.

    Args:
        departments: Departments in query order, duplicates allowed
        employees: Employees fetched for those departments

    Returns:
        Dictionary mapping every department to its employees. An employee goes
        to the first department whose id equals its department_id, and appears
        at most once. Employees matching no department are dropped.
    """
    grouped: dict[Department, list[Employee]] = {department: [] for department in departments}
    first_by_id: dict[int, Department] = {}
    for department in departments:
        first_by_id.setdefault(department.id, department)

    seen: set[int] = set()
    for employee in employees:
        if employee.id in seen:
            continue
        department = first_by_id.get(employee.department_id)
        if department is None:
            # Reassigned between the index read and the record read
            logger.warning("Dropping employee {} with unmatched department {}", employee.id, employee.department_id)
            continue
        seen.add(employee.id)
        grouped[department].append(employee)
    return grouped


async def load_department_employees(store: StaffStore, departments: list[Department]) -> dict[Department, list[Employee]]:
    """
    Fetch and group the employees of all given departments.

    Args:
        store: Staff store
        departments: Departments produced by a department-list query

    Returns:
        Dictionary mapping each department to its employees
    """
    department_ids = list(dict.fromkeys(department.id for department in departments))
    employees = await store.get_employees_by_departments(department_ids)
    logger.debug("Loaded {} employees for {} departments", len(employees), len(department_ids))
    return group_employees(departments, employees)


class StaffLoaders:
    """DataLoaders scoped to a single GraphQL request"""
    def __init__(self, store: StaffStore):
        self.store = store
        self.department_employees = DataLoader(load_fn=self._load_department_employees)

    async def _load_department_employees(self, departments: list[Department]) -> list[list[Employee]]:
        grouped = await load_department_employees(self.store, departments)
        return [grouped[department] for department in departments]
