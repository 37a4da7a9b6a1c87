"""
Combined GraphQL schema for Staff Gateway.

This module combines all GraphQL components (queries, mutations, subscriptions)
into a single Strawberry schema for use with FastAPI.
"""
from __future__ import annotations
import strawberry
from typing import TYPE_CHECKING

from staff_gateway.api.types import Employee, Department, AddEmployeeInput, UpdateSalaryInput
from staff_gateway.api.subscriptions import Subscription
from staff_gateway.api.extensions import RequestLoggingExtension, ErrorCodeExtension

if TYPE_CHECKING:
    from staff_gateway.staff_controller import StaffController

@strawberry.type
class Query:

    @strawberry.field
    async def all_department(self, info: strawberry.types.Info) -> list[Department]:
        """Get all departments."""
        staff_controller: StaffController = info.context["staff_controller"]
        return await staff_controller.get_departments()

    @strawberry.field
    async def employee_by_name(self, info: strawberry.types.Info, employee_name: str) -> list[Employee]:
        """Get all employees with exactly this name."""
        staff_controller: StaffController = info.context["staff_controller"]
        return await staff_controller.get_employees_by_name(employee_name)

@strawberry.type
class Mutation:

    @strawberry.mutation
    async def add_employee(self, info: strawberry.types.Info, add_employee_input: AddEmployeeInput) -> Employee:
        staff_controller: StaffController = info.context["staff_controller"]
        return await staff_controller.add_employee(add_employee_input)

    @strawberry.mutation
    async def update_salary(self, info: strawberry.types.Info, update_salary_input: UpdateSalaryInput) -> Employee:
        """Replace the salary of an existing employee."""
        staff_controller: StaffController = info.context["staff_controller"]
        return await staff_controller.update_salary(update_salary_input)

# Create the combined GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[RequestLoggingExtension, ErrorCodeExtension],
)
