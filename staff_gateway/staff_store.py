"""
Staff Store - Employee & Department persistence.

Handles all record CRUD operations against Redis. Layout:
    employee:{id}              hash  (name, salary, department_id)
    department:{id}            hash  (name)
    department_employees:{id}  set   of employee ids
    ids:employee               counter used for employee id generation

Every call is atomic on its own; nothing spans calls.
"""

from collections.abc import Iterable
from contextlib import asynccontextmanager

import redis.asyncio as redis
from redis.exceptions import RedisError

from staff_gateway.api.types import Employee, Department
from staff_gateway.errors import UpstreamError
from staff_gateway.helpers.serializers import employee_to_dict, department_to_dict
from staff_gateway.helpers.deserializers import dict_to_employee, dict_to_department


@asynccontextmanager
async def upstream(operation: str):
    """Re-raise Redis failures as UpstreamError"""
    try:
        yield
    except RedisError as e:
        raise UpstreamError(f"{operation} failed: {e}") from e


class StaffStore():
    def __init__(self, redis_client: redis.Redis):
        """Initialize StaffStore with Redis client"""
        self.redis = redis_client

    # Employees
    async def create_employee(self, name: str, salary: str, department_id: int) -> Employee:
        """Save a new employee under a freshly generated id"""
        async with upstream("create_employee"):
            id = await self.redis.incr("ids:employee")
        return await self.set_employee(Employee(id=id, name=name, salary=salary, department_id=department_id))

    async def set_employee(self, employee: Employee) -> Employee:
        """Save employee under its id. Returns the stored record."""
        async with upstream("set_employee"):
            key = f"employee:{employee.id}"
            previous_department = await self.redis.hget(key, "department_id")

            pipe = self.redis.pipeline()
            pipe.hset(key, mapping=employee_to_dict(employee))
            if previous_department and int(previous_department) != employee.department_id:
                pipe.srem(f"department_employees:{previous_department}", employee.id)
            if employee.department_id is not None:
                pipe.sadd(f"department_employees:{employee.department_id}", employee.id)
            await pipe.execute()
        return employee

    async def get_employee(self, id: int) -> Employee | None:
        async with upstream("get_employee"):
            return dict_to_employee(id, await self.redis.hgetall(f"employee:{id}"))

    async def get_employees(self) -> list[Employee]:
        """Full scan of employees, ordered by id"""
        async with upstream("get_employees"):
            ids = [int(k.split(":", 1)[1]) async for k in self.redis.scan_iter(match="employee:*")]
            return await self._load_employees(sorted(ids))

    async def get_employees_by_name(self, name: str) -> list[Employee]:
        return [employee for employee in await self.get_employees() if employee.name == name]

    async def get_employees_by_departments(self, department_ids: Iterable[int]) -> list[Employee]:
        """Employees of all given departments in one pipelined pass, ordered by id"""
        async with upstream("get_employees_by_departments"):
            pipe = self.redis.pipeline()
            for department_id in department_ids:
                pipe.smembers(f"department_employees:{department_id}")
            members = await pipe.execute()
            return await self._load_employees(sorted({int(m) for ms in members for m in ms}))

    async def _load_employees(self, ids: list[int]) -> list[Employee]:
        if not ids:
            return []
        pipe = self.redis.pipeline()
        for id in ids:
            pipe.hgetall(f"employee:{id}")
        return [employee for id, d in zip(ids, await pipe.execute()) if (employee:=dict_to_employee(id, d)) is not None]

    # Departments
    async def set_department(self, department: Department) -> Department:
        async with upstream("set_department"):
            await self.redis.hset(f"department:{department.id}", mapping=department_to_dict(department))
        return department

    async def get_department(self, id: int) -> Department | None:
        async with upstream("get_department"):
            return dict_to_department(id, await self.redis.hgetall(f"department:{id}"))

    async def get_departments(self) -> list[Department]:
        """Full scan of departments, ordered by id"""
        async with upstream("get_departments"):
            ids = sorted([int(k.split(":", 1)[1]) async for k in self.redis.scan_iter(match="department:*")])
            pipe = self.redis.pipeline()
            for id in ids:
                pipe.hgetall(f"department:{id}")
            return [department for id, d in zip(ids, await pipe.execute()) if (department:=dict_to_department(id, d)) is not None]

    async def sync_id_counters(self):
        """Move the employee id counter past records written with explicit ids (seeding)"""
        async with upstream("sync_id_counters"):
            ids = [int(k.split(":", 1)[1]) async for k in self.redis.scan_iter(match="employee:*")]
            current = int(await self.redis.get("ids:employee") or 0)
            if ids and max(ids) > current:
                await self.redis.set("ids:employee", max(ids))
