import asyncio

from shiny import reactive, render
from shiny.express import input, ui
from shinywidgets import render_plotly

# Import organized modules
from employee_stats.config import (
    DEFAULT_AGE_THRESHOLD,
    DEFAULT_COUNT,
    DEFAULT_TOP_DEPARTMENT,
    DEPARTMENTS,
)
from employee_stats.errors import DatasetError, DecodeError, ValidationError
from employee_stats.plotting import create_department_plot
from employee_stats.report import EXPECTED_FORMAT_HINT, render_report
from employee_stats.session import DatasetSession, Outcome
from employee_stats.storage import format_file_size

# ======================================================
#  REACTIVE STATE
# ======================================================
# One session per app process; the current dataset lives there, not here.
dataset_session = DatasetSession()

status_store = reactive.Value("Ready to process datasets")
output_store = reactive.Value("")
report_store = reactive.Value(None)


def _outcome_text(outcome: Outcome, action: str) -> str:
    lines = [f"{action} {len(outcome.dataset)} employee records"]
    if outcome.persisted:
        lines.append(f"Dataset saved to: {outcome.path}")
    else:
        lines.append(f"Warning: {outcome.persist_error}")
    return "\n".join(lines) + "\n"


# ======================================================
#  UI LAYOUT
# ======================================================
ui.page_opts(
    title="Employee Dataset Processor",
    fillable=False,
    full_width=True,
    lang="en",
)

with ui.sidebar(open="always", position="right"):
    ui.input_numeric("count", "Employees to generate", DEFAULT_COUNT, min=1, step=1000)
    ui.input_action_button("generate", "Generate random dataset", class_="btn-primary")
    ui.input_file("upload", "Upload custom dataset", accept=[".json"], multiple=False)
    ui.input_select(
        "department",
        "Top earner department",
        DEPARTMENTS,
        selected=DEFAULT_TOP_DEPARTMENT,
    )
    ui.input_numeric("age_threshold", "Age threshold", DEFAULT_AGE_THRESHOLD, min=0)
    ui.input_action_button("process", "Process dataset", class_="btn-success mt-3")


@render.text
def status_line():
    return status_store.get()


@render.code
def output_area():
    return output_store.get()


@render_plotly
def department_plot():
    report = report_store.get()
    if report is None:
        return None
    return create_department_plot(report)


# ======================================================
#  ACTIONS
# ======================================================


@reactive.effect
@reactive.event(input.generate)
async def _generate():
    status_store.set("Generating random dataset...")
    output_store.set("")
    report_store.set(None)
    try:
        outcome = await asyncio.wrap_future(
            dataset_session.submit(dataset_session.generate, int(input.count()))
        )
    except (ValueError, TypeError) as exc:
        status_store.set(f"Error generating dataset: {exc}")
        output_store.set(f"Error: {exc}\n")
        return

    status_store.set(
        "Random dataset generated successfully! "
        f"Size: {format_file_size(outcome.size)}"
    )
    output_store.set(_outcome_text(outcome, "Generated"))


@reactive.effect
@reactive.event(input.upload)
async def _upload():
    files = input.upload()
    if not files:
        return
    selected = files[0]
    status_store.set("Loading custom dataset...")
    output_store.set("")
    report_store.set(None)

    with open(selected["datapath"], "rb") as fh:
        content = fh.read()
    try:
        outcome = await asyncio.wrap_future(
            dataset_session.submit(dataset_session.upload, content, selected["name"])
        )
    except (DecodeError, ValidationError) as exc:
        status_store.set(f"Error loading dataset: {exc}")
        output_store.set(f"Error: {exc}\n{EXPECTED_FORMAT_HINT}")
        return

    status_store.set(
        "Custom dataset loaded successfully! "
        f"Size: {format_file_size(outcome.size)}"
    )
    output_store.set(_outcome_text(outcome, f"Loaded from {selected['name']}:"))


@reactive.effect
@reactive.event(input.process)
async def _process():
    status_store.set("Processing dataset...")
    try:
        report = await asyncio.wrap_future(
            dataset_session.submit(
                dataset_session.process,
                department=input.department(),
                age_threshold=int(input.age_threshold()),
            )
        )
    except DatasetError as exc:
        status_store.set(str(exc))
        output_store.set("No dataset available for processing.\n")
        report_store.set(None)
        return

    report_store.set(report)
    output_store.set(render_report(report))
    status_store.set("Dataset processing completed successfully!")
