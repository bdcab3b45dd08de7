"""employee_stats package initializer.

Core pipeline for employee datasets: the record model, the JSON codec,
validation, synthetic generation and aggregation, plus the session object
the Shiny app and the CLI use to hold the current dataset.  See individual
module docstrings for details.
"""

from .aggregator import AggregationReport, SalaryStats, aggregate
from .codec import decode, encode
from .errors import (
    DatasetError,
    DecodeError,
    EmptyDatasetError,
    NoDatasetError,
    PersistenceError,
    ValidationError,
)
from .generator import generate
from .models import Dataset, Employee, is_valid
from .session import DatasetSession, Outcome
from .validator import validate

__all__ = [
    "AggregationReport",
    "Dataset",
    "DatasetError",
    "DatasetSession",
    "DecodeError",
    "EmptyDatasetError",
    "Employee",
    "NoDatasetError",
    "Outcome",
    "PersistenceError",
    "SalaryStats",
    "ValidationError",
    "aggregate",
    "decode",
    "encode",
    "generate",
    "is_valid",
    "validate",
]
