"""Accept or reject a decoded employee sequence."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .errors import ValidationError
from .models import Dataset, Employee, invalid_field

logger = logging.getLogger(__name__)


def validate(records: Optional[Iterable[Employee]]) -> Dataset:
    """Check ``records`` against the record rules and wrap them in a Dataset.

    Validation is fail-fast: the first offending record (in original order)
    raises, and later records are not inspected.  On success the full
    sequence is kept as-is, with no reordering, dropping or deduplication.
    """
    records = list(records) if records is not None else []
    if not records:
        raise ValidationError(
            ValidationError.EMPTY_OR_MISSING, "Invalid JSON structure or empty dataset"
        )

    for index, emp in enumerate(records):
        field = invalid_field(emp)
        if field is None:
            continue
        value = getattr(emp, field)
        if field == "name":
            message = f"Employee at index {index} has invalid name"
        else:
            message = f"Employee {emp.name} has invalid {field}: {value}"
        logger.info("Rejected dataset at index %d (%s=%r)", index, field, value)
        raise ValidationError(
            ValidationError.INVALID_FIELD,
            message,
            index=index,
            field=field,
            value=value,
            employee_name=emp.name if field != "name" else None,
        )

    return Dataset(tuple(records))
