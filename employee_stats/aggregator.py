"""Summary statistics over an accepted employee dataset.

The primary entry point is :func:`aggregate`, which builds one DataFrame
from the dataset and derives every figure of the report from it: head
count, grouping by department, salary summary, the employees above an age
threshold and the top earner of one department.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pandas as pd

from .config import DEFAULT_AGE_THRESHOLD, DEFAULT_TOP_DEPARTMENT
from .errors import EmptyDatasetError
from .models import Dataset, Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalaryStats:
    count: int
    minimum: float
    maximum: float
    average: float
    total: float


@dataclass(frozen=True)
class AggregationReport:
    """Derived figures for one dataset; recomputed on every request."""

    count: int
    by_department: Dict[str, Tuple[Employee, ...]]
    salary_stats: SalaryStats
    age_threshold: int
    above_age: Tuple[Employee, ...]
    top_earner_department: str
    top_earner: Optional[Employee]
    avg_salary_by_department: Dict[str, float]
    sample: str

    @property
    def department_counts(self) -> Dict[str, int]:
        return {dept: len(members) for dept, members in self.by_department.items()}

    @property
    def above_age_count(self) -> int:
        return len(self.above_age)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def describe_employee(emp: Employee) -> str:
    """Short ``"<name> - <department>"`` label."""
    return f"{emp.name} - {emp.department}"


def group_by_department(
    df: pd.DataFrame, dataset: Dataset
) -> Tuple[Dict[str, Tuple[Employee, ...]], Dict[str, float]]:
    """Bucket employees by department, keyed in order of first appearance.

    Returns the members and the mean salary of each bucket, both keyed by
    the same group labels.  Only departments present in the data get a key;
    every employee lands in exactly one bucket (a missing department forms
    its own) and keeps its relative order.
    """
    members: Dict[str, Tuple[Employee, ...]] = {}
    averages: Dict[str, float] = {}
    for dept, group in df.groupby("department", sort=False, dropna=False):
        members[dept] = tuple(dataset[pos] for pos in group.index)
        averages[dept] = float(group["salary"].mean())
    return members, averages


def salary_summary(salaries: pd.Series) -> SalaryStats:
    return SalaryStats(
        count=int(salaries.count()),
        minimum=float(salaries.min()),
        maximum=float(salaries.max()),
        average=float(salaries.mean()),
        total=float(salaries.sum()),
    )


def top_earner_in(
    df: pd.DataFrame, dataset: Dataset, department: str
) -> Optional[Employee]:
    """Highest salary within ``department``; ties go to the earliest record.

    Returns ``None`` when nobody works in ``department``.
    """
    members = df.loc[df["department"] == department, "salary"]
    if members.empty:
        return None
    # idxmax reports the first label holding the maximum
    return dataset[int(members.idxmax())]


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def aggregate(
    dataset: Optional[Dataset],
    *,
    department: str = DEFAULT_TOP_DEPARTMENT,
    age_threshold: int = DEFAULT_AGE_THRESHOLD,
) -> AggregationReport:
    """Compute the aggregation report for ``dataset``.

    Parameters
    ----------
    dataset : Dataset
        An accepted, non-empty dataset.
    department : str, optional
        Department whose top earner is reported.  Defaults to
        ``"Engineering"``.
    age_threshold : int, optional
        Employees strictly older than this are counted in ``above_age``.

    Returns
    -------
    AggregationReport
        The report; equal inputs always give equal reports.

    Raises
    ------
    EmptyDatasetError
        If ``dataset`` is ``None`` or empty.  A zeroed report is never
        produced.
    """
    if dataset is None or len(dataset) == 0:
        raise EmptyDatasetError("Cannot aggregate an empty dataset")

    df = dataset.to_frame()

    by_department, avg_by_department = group_by_department(df, dataset)
    older = (df["age"] > age_threshold).to_numpy()
    above_age = tuple(dataset[pos] for pos in df.index[older])

    report = AggregationReport(
        count=len(dataset),
        by_department=by_department,
        salary_stats=salary_summary(df["salary"]),
        age_threshold=age_threshold,
        above_age=above_age,
        top_earner_department=department,
        top_earner=top_earner_in(df, dataset, department),
        avg_salary_by_department=avg_by_department,
        sample=describe_employee(dataset[0]),
    )
    logger.debug(
        "Aggregated %d records across %d departments", report.count, len(by_department)
    )
    return report
