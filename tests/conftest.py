"""Shared fixtures for the employee_stats test suite.

- Persistence isolation: every test writes into its own tmp directory
- Sample data factories: the small three-record dataset used throughout
"""

import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from employee_stats.models import Dataset, Employee  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the persisted dataset location at a per-test directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATASET_DIR", str(data_dir))
    return data_dir


@pytest.fixture
def employees():
    return [
        Employee("Alice", 25, "Engineering", 80000.0),
        Employee("Bob", 40, "Engineering", 95000.0),
        Employee("Cara", 35, "HR", 60000.0),
    ]


@pytest.fixture
def sample_dataset(employees):
    return Dataset(tuple(employees))


@pytest.fixture
def sample_json():
    return """[
  {"name": "Alice", "age": 25, "department": "Engineering", "salary": 80000},
  {"name": "Bob", "age": 40, "department": "Engineering", "salary": 95000.0},
  {"name": "Cara", "age": 35, "department": "HR", "salary": 60000.5}
]"""
