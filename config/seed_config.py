"""
Staff seed data loader.

Reads departments and employees from a seed.yaml file and writes them
through the StaffStore. Departments cannot be created via the API, so this
is how a fresh datastore gets them.
"""

import yaml
from pathlib import Path
from typing import TypedDict

from loguru import logger

from staff_gateway.api.types import Employee, Department
from staff_gateway.staff_store import StaffStore


class DepartmentSeedDict(TypedDict):
    """Type definition for a seeded department"""
    id: int
    name: str


class EmployeeSeedDict(TypedDict):
    """Type definition for a seeded employee"""
    id: int
    name: str
    salary: str
    department_id: int


class SeedConfigDict(TypedDict):
    departments: list[DepartmentSeedDict]
    employees: list[EmployeeSeedDict]


def load_seed_config(config_path: str | None = None) -> SeedConfigDict:
    """
    Load seed data from YAML file.

    Args:
        config_path: Path to seed.yaml. If None, uses default location.

    Returns:
        Dictionary with 'departments' and 'employees' lists
    """
    if config_path is None:
        # Default to config/seed.yaml
        config_dir = Path(__file__).parent
        config_path = config_dir / "seed.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Seed file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    return {
        'departments': config.get('departments', []),
        'employees': config.get('employees', []),
    }


async def apply_seed(store: StaffStore, seed: SeedConfigDict):
    """Write seed records with their given ids, then move the id counters past them."""
    for d in seed['departments']:
        await store.set_department(Department(id=int(d['id']), name=d['name']))
    for e in seed['employees']:
        # Salaries are strings; YAML may have parsed them as numbers
        await store.set_employee(Employee(id=int(e['id']), name=e['name'], salary=str(e['salary']),
                                          department_id=int(e['department_id'])))
    await store.sync_id_counters()
    logger.info("Seeded {} departments and {} employees", len(seed['departments']), len(seed['employees']))
