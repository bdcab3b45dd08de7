import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .aggregator import AggregationReport
from .report import department_frame


# ============================================================
# Configuration / constants
# ============================================================

BAR_COLOR = "#1f77b4"
LINE_COLOR = "#ff7f0e"

HOVER_TEMPLATE_COUNT = (
    "Department: %{x}<br>"
    "Employees: %{y:,}<extra></extra>"
)

HOVER_TEMPLATE_SALARY = (
    "Department: %{x}<br>"
    "Average salary: $%{y:,.2f}<extra></extra>"
)


# ============================================================
# Main plotting function
# ============================================================


def create_department_plot(
    report: AggregationReport,
    *,
    title: str | None = None,
    bar_color: str = BAR_COLOR,
    line_color: str = LINE_COLOR,
) -> go.Figure:
    """
    Head count per department with average salary on a secondary axis.

    Parameters
    ----------
    report : AggregationReport
        Aggregated figures for the current dataset.
    title : str | None, default None
        Figure title; defaults to one mentioning the record count.
    bar_color, line_color : str
        Hex colors for the head-count bars and the salary line.

    Returns
    -------
    go.Figure
        An empty figure when the report has no departments.
    """
    df = department_frame(report)
    if df.empty:
        return go.Figure()

    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(
        go.Bar(
            x=df["department"],
            y=df["employees"],
            name="Employees",
            marker=dict(color=bar_color),
            hovertemplate=HOVER_TEMPLATE_COUNT,
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(
            x=df["department"],
            y=df["avg_salary"],
            mode="lines+markers",
            name="Average salary",
            line=dict(width=3, color=line_color),
            marker=dict(size=9, color=line_color),
            hovertemplate=HOVER_TEMPLATE_SALARY,
        ),
        secondary_y=True,
    )

    fig.update_xaxes(title_text="Department")
    fig.update_yaxes(title_text="Employees", tickformat=",", rangemode="tozero", secondary_y=False)
    fig.update_yaxes(title_text="Average salary ($)", tickformat=",", secondary_y=True)

    fig.update_layout(
        title=title or f"<b>Employees by department ({report.count:,} records)</b>",
        height=600,
        legend=dict(
            orientation="h",
            x=0.5,
            y=1.02,
            xanchor="center",
            yanchor="bottom",
            bordercolor="#c7c7c7",
            borderwidth=2,
            bgcolor="#f9f9f9",
            font=dict(size=12),
        ),
        margin=dict(t=100, l=50, r=80, b=40),
        plot_bgcolor="#f5f7fb",
    )
    return fig
