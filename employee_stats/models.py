"""Employee record, the validity predicate, and the immutable Dataset wrapper.

:func:`invalid_field` is the one place the business rules live; the
validator goes through it (or :func:`is_valid`) rather than
restating the bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

import pandas as pd

from .config import AGE_MAX, AGE_MIN_EXCLUSIVE, FIELD_ORDER, SALARY_MIN


@dataclass(frozen=True)
class Employee:
    """A single employee entry.

    ``name`` is typed optional because a decoded upload may carry ``null``;
    such a record never survives validation.
    """

    name: Optional[str]
    age: int
    department: str
    salary: float

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict in interchange field order."""
        return {field: getattr(self, field) for field in FIELD_ORDER}


def invalid_field(record: Employee) -> Optional[str]:
    """Return the first field of ``record`` that breaks the rules, else ``None``.

    Fields are checked in the order ``name``, ``age``, ``salary``:

    * ``name`` must be a string that is not blank after trimming.
    * ``age`` must satisfy ``0 < age <= 120``.
    * ``salary`` must be ``>= 0`` (NaN fails).
    """
    name = record.name
    if name is None or not str(name).strip():
        return "name"
    if not (AGE_MIN_EXCLUSIVE < record.age <= AGE_MAX):
        return "age"
    if not record.salary >= SALARY_MIN:
        return "salary"
    return None


def is_valid(record: Employee) -> bool:
    return invalid_field(record) is None


@dataclass(frozen=True)
class Dataset:
    """Ordered, immutable sequence of employees treated as a unit."""

    employees: Tuple[Employee, ...] = ()

    def __len__(self) -> int:
        return len(self.employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.employees)

    def __getitem__(self, index: int) -> Employee:
        return self.employees[index]

    def records(self) -> List[Dict[str, Any]]:
        return [emp.to_dict() for emp in self.employees]

    def to_frame(self) -> pd.DataFrame:
        """Return the dataset as a DataFrame with one row per employee.

        Row order matches the dataset order, so positional lookups on the
        frame map straight back onto :attr:`employees`.
        """
        return pd.DataFrame.from_records(self.records(), columns=list(FIELD_ORDER))
