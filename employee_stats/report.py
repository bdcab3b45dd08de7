"""Text and tabular views of an :class:`AggregationReport` for display."""

from __future__ import annotations

import pandas as pd

from .aggregator import AggregationReport

EXPECTED_FORMAT_HINT = """Please ensure your JSON file has the correct structure:
[
  {
    "name": "Employee Name",
    "age": 25,
    "department": "Department Name",
    "salary": 50000.0
  }
]
"""


def department_frame(report: AggregationReport) -> pd.DataFrame:
    """One row per department: head count and average salary."""
    counts = report.department_counts
    return pd.DataFrame(
        {
            "department": list(counts),
            "employees": list(counts.values()),
            "avg_salary": [report.avg_salary_by_department[d] for d in counts],
        }
    )


def render_report(report: AggregationReport) -> str:
    lines = [
        f"Dataset loaded with {report.count} employees",
        "",
        f"Sample: {report.sample}",
        "",
        f"Average salary: ${report.salary_stats.average:,.2f}",
        f"Salary range: ${report.salary_stats.minimum:,.2f} - "
        f"${report.salary_stats.maximum:,.2f}",
        f"Employees above {report.age_threshold}: {report.above_age_count}",
    ]
    if report.top_earner is not None:
        lines.append(
            f"Highest paid in {report.top_earner_department}: "
            f"{report.top_earner.name} - ${report.top_earner.salary:,.2f}"
        )

    lines += ["", "Employees by department:"]
    for dept, count in report.department_counts.items():
        lines.append(f"{dept}: {count} employees")

    lines += ["", "Average salary by department:"]
    for dept, avg in report.avg_salary_by_department.items():
        lines.append(f"{dept}: ${avg:,.2f}")

    return "\n".join(lines) + "\n"
