"""
GraphQL type definitions for Staff Gateway API.

These @strawberry.type classes are used both internally (store, controller)
and exposed via GraphQL.
"""
from __future__ import annotations
import strawberry
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staff_gateway.api.data_loaders import StaffLoaders

# Note: In redis, employees are also indexed per department for the batch loader

@strawberry.type
class Employee:
    """Staff member, id is assigned by the store on creation"""
    id: int
    name: str
    salary: str
    department_id: int | None

@strawberry.type
class Department:
    """Department record, employees are resolved per request and never stored"""
    id: int
    name: str

    def __hash__(self) -> int:
        return hash(self.id)

    @strawberry.field
    async def employees(self, info: strawberry.types.Info) -> list[Employee]:
        loaders: StaffLoaders = info.context["loaders"]
        return await loaders.department_employees.load(self)

# Input types for mutations
@strawberry.input
class AddEmployeeInput:
    name: str
    salary: str
    department_id: int

@strawberry.input
class UpdateSalaryInput:
    employee_id: int
    salary: str
