"""Tests for models.py - the record rules and the Dataset wrapper."""

import dataclasses

import pytest

from employee_stats.models import Dataset, Employee, invalid_field, is_valid


@pytest.mark.parametrize(
    "record",
    [
        Employee("Alice", 25, "Engineering", 80000.0),
        Employee("  Bob  ", 1, "HR", 0.0),
        Employee("Old Timer", 120, "Legal", 1.0),
        Employee("No Dept", 30, "", 10.0),
    ],
)
def test_valid_records(record):
    assert is_valid(record)
    assert invalid_field(record) is None


@pytest.mark.parametrize(
    "record,field",
    [
        (Employee(None, 25, "HR", 1.0), "name"),
        (Employee("", 25, "HR", 1.0), "name"),
        (Employee("   ", 25, "HR", 1.0), "name"),
        (Employee("Zero", 0, "HR", 1.0), "age"),
        (Employee("Negative", -3, "HR", 1.0), "age"),
        (Employee("Too Old", 121, "HR", 1.0), "age"),
        (Employee("Debt", 30, "HR", -0.01), "salary"),
        (Employee("Nan", 30, "HR", float("nan")), "salary"),
    ],
)
def test_invalid_records(record, field):
    assert not is_valid(record)
    assert invalid_field(record) == field


def test_name_is_checked_before_age_and_salary():
    assert invalid_field(Employee(" ", 500, "HR", -1.0)) == "name"
    assert invalid_field(Employee("A", 500, "HR", -1.0)) == "age"


def test_employee_is_immutable_value():
    emp = Employee("Alice", 25, "Engineering", 80000.0)
    assert emp == Employee("Alice", 25, "Engineering", 80000.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        emp.age = 26


def test_to_dict_uses_interchange_field_order():
    emp = Employee("Alice", 25, "Engineering", 80000.0)
    assert list(emp.to_dict()) == ["name", "age", "department", "salary"]


def test_dataset_sequence_behaviour(sample_dataset, employees):
    assert len(sample_dataset) == 3
    assert list(sample_dataset) == employees
    assert sample_dataset[1].name == "Bob"
    assert sample_dataset == Dataset(tuple(employees))


def test_dataset_to_frame_keeps_order(sample_dataset):
    df = sample_dataset.to_frame()
    assert list(df.columns) == ["name", "age", "department", "salary"]
    assert df["name"].tolist() == ["Alice", "Bob", "Cara"]
    assert df["salary"].tolist() == [80000.0, 95000.0, 60000.0]


def test_empty_dataset_frame_has_columns():
    df = Dataset().to_frame()
    assert df.empty
    assert list(df.columns) == ["name", "age", "department", "salary"]
