from __future__ import annotations
from typing import TYPE_CHECKING, AsyncGenerator
from decimal import Decimal, InvalidOperation
import asyncio
import dataclasses

from loguru import logger

from staff_gateway.errors import NotFoundError, ValidationError
from staff_gateway.staff_store import StaffStore

if TYPE_CHECKING:
    from staff_gateway.api.types import Employee, Department, AddEmployeeInput, UpdateSalaryInput


def validate_salary(salary: str):
    """Salary stays a string but must read as a finite, non-negative decimal"""
    try:
        value = Decimal(salary)
    except InvalidOperation:
        raise ValidationError(f"Salary {salary!r} is not a number") from None
    if not value.is_finite() or value < 0:
        raise ValidationError(f"Salary {salary!r} must be a non-negative number")


def validate_id(id: int, field: str):
    if id <= 0:
        raise ValidationError(f"{field} must be a positive integer, got {id}")


class StaffController():
    def __init__(self, staff_store: StaffStore):
        self.staff_store = staff_store

    async def get_departments(self) -> list[Department]:
        return await self.staff_store.get_departments()

    async def get_employees_by_name(self, name: str) -> list[Employee]:
        return await self.staff_store.get_employees_by_name(name)

    async def add_employee(self, employee_input: AddEmployeeInput) -> Employee:
        if not employee_input.name.strip():
            raise ValidationError("Employee name must not be blank")
        validate_salary(employee_input.salary)
        validate_id(employee_input.department_id, "departmentId")

        # No dedup: identical inputs create distinct employees
        employee = await self.staff_store.create_employee(employee_input.name, employee_input.salary,
                                                          employee_input.department_id)
        logger.info("Added employee {} to department {}", employee.id, employee.department_id)
        return employee

    async def update_salary(self, salary_input: UpdateSalaryInput) -> Employee:
        validate_salary(salary_input.salary)

        # Ids that cannot exist (zero, negative) fall through to NotFound like any other missing id
        employee = await self.staff_store.get_employee(salary_input.employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {salary_input.employee_id} not found")

        # Lookup and save are separate calls; a concurrent write in between is overwritten
        employee = await self.staff_store.set_employee(dataclasses.replace(employee, salary=salary_input.salary))
        logger.info("Updated salary of employee {}", employee.id)
        return employee

    async def stream_employees(self, delay: float) -> AsyncGenerator[Employee, None]:
        """
        Emit a snapshot of all employees, waiting `delay` seconds before each one.

        The snapshot is taken on first iteration, so employees added later are not
        emitted. Closing the generator stops emission at the pending delay.
        """
        employees = await self.staff_store.get_employees()
        logger.debug("Streaming {} employees every {}s", len(employees), delay)
        for employee in employees:
            await asyncio.sleep(delay)
            yield employee
