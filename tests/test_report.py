"""Tests for report.py and plotting.py - display views of a report."""

import plotly.graph_objects as go

from employee_stats.aggregator import aggregate
from employee_stats.models import Dataset, Employee
from employee_stats.plotting import create_department_plot
from employee_stats.report import department_frame, render_report


def test_render_report(sample_dataset):
    text = render_report(aggregate(sample_dataset))

    assert "Dataset loaded with 3 employees" in text
    assert "Sample: Alice - Engineering" in text
    assert "Average salary: $78,333.33" in text
    assert "Employees above 30: 2" in text
    assert "Highest paid in Engineering: Bob - $95,000.00" in text
    assert "Engineering: 2 employees" in text
    assert "HR: $60,000.00" in text


def test_render_report_omits_missing_top_earner(sample_dataset):
    text = render_report(aggregate(sample_dataset, department="Legal"))
    assert "Highest paid" not in text


def test_department_frame(sample_dataset):
    df = department_frame(aggregate(sample_dataset))
    assert df["department"].tolist() == ["Engineering", "HR"]
    assert df["employees"].tolist() == [2, 1]
    assert df["avg_salary"].tolist() == [87500.0, 60000.0]


def test_department_plot(sample_dataset):
    fig = create_department_plot(aggregate(sample_dataset))
    assert isinstance(fig, go.Figure)
    assert [trace.name for trace in fig.data] == ["Employees", "Average salary"]
    assert list(fig.data[0].x) == ["Engineering", "HR"]
    assert "3 records" in fig.layout.title.text


def test_department_frame_keeps_missing_department():
    dataset = Dataset(
        (Employee("NoDept", 30, None, 10.0), Employee("Staff", 40, "HR", 20.0))
    )
    frame = department_frame(aggregate(dataset))

    assert len(frame) == 2
    assert frame["employees"].sum() == 2
    assert "HR: 1 employees" in render_report(aggregate(dataset))
