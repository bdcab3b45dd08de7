"""Error taxonomy for decoding, validating, aggregating and persisting datasets."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class DatasetError(Exception):
    """Base class for every error the pipeline reports to its caller."""


class DecodeError(DatasetError):
    """The interchange text is not a well-formed array of employee objects."""


class ValidationError(DatasetError):
    """A decoded sequence violates the business rules.

    ``reason`` is :attr:`EMPTY_OR_MISSING` or :attr:`INVALID_FIELD`.  For
    the latter, ``index``, ``field`` and ``value`` identify the first
    offending record, and ``employee_name`` carries its name when it has one.
    """

    EMPTY_OR_MISSING = "empty_or_missing"
    INVALID_FIELD = "invalid_field"

    def __init__(
        self,
        reason: str,
        message: str,
        *,
        index: Optional[int] = None,
        field: Optional[str] = None,
        value: Any = None,
        employee_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.index = index
        self.field = field
        self.value = value
        self.employee_name = employee_name


class EmptyDatasetError(DatasetError):
    """Aggregation was requested over an empty dataset."""


class NoDatasetError(EmptyDatasetError):
    """No dataset has been generated or uploaded yet."""


class PersistenceError(DatasetError):
    """Writing or reading the persisted dataset file failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not access dataset file {path}: {cause}")
        self.path = path
        self.cause = cause
