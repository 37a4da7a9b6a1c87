"""
Tests for the batched department -> employees loader.

Covers the grouping rules (first matching department wins, no duplicates,
unmatched employees dropped) and that a whole batch costs one store call.
"""
from __future__ import annotations

import asyncio
import pytest
from unittest.mock import AsyncMock

from staff_gateway.api.types import Employee, Department
from staff_gateway.api.data_loaders import group_employees, load_department_employees, StaffLoaders


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def make_employee(id, department_id, name=None):
    return Employee(id=id, name=name or f"employee{id}", salary="1000", department_id=department_id)


def make_store(employees):
    store = AsyncMock()
    store.get_employees_by_departments.return_value = employees
    return store


ENG = Department(id=1, name="Engineering")
FIN = Department(id=2, name="Finance")
OPS = Department(id=3, name="Operations")


# ---------------------------------------------------------------------------
# group_employees
# ---------------------------------------------------------------------------

class TestGroupEmployees:
    def test_every_matching_employee_grouped_once(self):
        employees = [make_employee(1, 1), make_employee(2, 2), make_employee(3, 1), make_employee(4, 3)]
        grouped = group_employees([ENG, FIN, OPS], employees)

        assert [e.id for e in grouped[ENG]] == [1, 3]
        assert [e.id for e in grouped[FIN]] == [2]
        assert [e.id for e in grouped[OPS]] == [4]
        all_ids = [e.id for es in grouped.values() for e in es]
        assert sorted(all_ids) == [1, 2, 3, 4]

    def test_department_without_employees_maps_to_empty_list(self):
        grouped = group_employees([ENG, FIN], [make_employee(1, 1)])
        assert grouped[FIN] == []

    def test_unmatched_employee_is_dropped(self):
        grouped = group_employees([ENG], [make_employee(1, 1), make_employee(2, 9)])
        assert [e.id for es in grouped.values() for e in es] == [1]

    def test_employee_without_department_is_dropped(self):
        grouped = group_employees([ENG], [make_employee(1, None)])
        assert grouped[ENG] == []

    def test_first_department_with_matching_id_wins(self):
        renamed = Department(id=1, name="Engineering (renamed)")
        grouped = group_employees([ENG, renamed], [make_employee(1, 1)])
        assert [e.id for e in grouped[ENG]] == [1]
        assert grouped[renamed] == []

    def test_duplicate_employee_rows_are_not_duplicated(self):
        grouped = group_employees([ENG, FIN], [make_employee(1, 1), make_employee(1, 1)])
        assert [e.id for e in grouped[ENG]] == [1]

    def test_grouping_is_deterministic_for_fixed_input(self):
        employees = [make_employee(i, i % 3 + 1) for i in range(1, 20)]
        first = group_employees([OPS, ENG, FIN], employees)
        second = group_employees([OPS, ENG, FIN], employees)
        assert list(first.keys()) == [OPS, ENG, FIN]
        assert first == second


# ---------------------------------------------------------------------------
# load_department_employees
# ---------------------------------------------------------------------------

class TestLoadDepartmentEmployees:
    @pytest.mark.asyncio
    async def test_single_fan_out_with_unique_ids_in_order(self):
        store = make_store([make_employee(1, 2)])
        await load_department_employees(store, [FIN, ENG, FIN])
        store.get_employees_by_departments.assert_awaited_once_with([2, 1])

    @pytest.mark.asyncio
    async def test_has_no_side_effects_beyond_read(self):
        store = make_store([])
        await load_department_employees(store, [ENG])
        store.create_employee.assert_not_called()
        store.set_employee.assert_not_called()
        store.set_department.assert_not_called()

    @pytest.mark.asyncio
    async def test_end_to_end_with_store(self, store):
        await store.set_department(ENG)
        await store.set_department(FIN)
        for department_id in (1, 2, 2):
            await store.create_employee("x", "1", department_id)

        grouped = await load_department_employees(store, await store.get_departments())
        assert {d.id: [e.id for e in es] for d, es in grouped.items()} == {1: [1], 2: [2, 3]}


# ---------------------------------------------------------------------------
# StaffLoaders (DataLoader batching)
# ---------------------------------------------------------------------------

class TestStaffLoaders:
    @pytest.mark.asyncio
    async def test_concurrent_loads_share_one_batch(self):
        store = make_store([make_employee(1, 1), make_employee(2, 2)])
        loaders = StaffLoaders(store)

        eng, fin, ops = await asyncio.gather(
            loaders.department_employees.load(ENG),
            loaders.department_employees.load(FIN),
            loaders.department_employees.load(OPS),
        )

        assert [e.id for e in eng] == [1]
        assert [e.id for e in fin] == [2]
        assert ops == []
        store.get_employees_by_departments.assert_awaited_once_with([1, 2, 3])

    @pytest.mark.asyncio
    async def test_loaders_are_independent_per_request(self):
        store = make_store([make_employee(1, 1)])
        await StaffLoaders(store).department_employees.load(ENG)
        await StaffLoaders(store).department_employees.load(ENG)
        assert store.get_employees_by_departments.await_count == 2
