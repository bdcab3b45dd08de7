"""Synthetic employee datasets drawn from the fixed name/department pools."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import (
    AGE_BASE,
    AGE_SPAN,
    DEFAULT_COUNT,
    DEPARTMENTS,
    FIRST_NAMES,
    LAST_NAMES,
    SALARY_BASE,
    SALARY_SPAN,
)
from .models import Dataset, Employee

logger = logging.getLogger(__name__)


def generate(count: int = DEFAULT_COUNT, seed: Optional[int] = None) -> Dataset:
    """Draw ``count`` independent employees.

    Parameters
    ----------
    count : int, optional
        Number of records; defaults to ``config.DEFAULT_COUNT``.
    seed : Optional[int], optional
        Seed for the random generator.  The same seed always yields the
        same dataset; ``None`` draws fresh entropy.

    Returns
    -------
    Dataset
        Records that satisfy the record rules by construction: ages in
        22..79, salaries in [30000, 150000), departments from the fixed pool.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    rng = np.random.default_rng(seed)
    first = rng.integers(0, len(FIRST_NAMES), size=count)
    last = rng.integers(0, len(LAST_NAMES), size=count)
    ages = AGE_BASE + rng.integers(0, AGE_SPAN, size=count)
    depts = rng.integers(0, len(DEPARTMENTS), size=count)
    salaries = SALARY_BASE + rng.random(size=count) * SALARY_SPAN

    employees = tuple(
        Employee(
            name=f"{FIRST_NAMES[f]} {LAST_NAMES[l]}",
            age=int(a),
            department=DEPARTMENTS[d],
            salary=float(s),
        )
        for f, l, a, d, s in zip(first, last, ages, depts, salaries)
    )
    logger.info("Generated %d employee records (seed=%s)", count, seed)
    return Dataset(employees)
